from setuptools import setup

with open("README.md") as f:
    readme = f.read()

about = {}
with open("maze_astar/_version.py") as f:
    exec(f.read(), about)

setup(
    name=about["__title__"],
    version=about["__version__"],
    description=about["__description__"],
    long_description=readme,
    long_description_content_type="text/markdown",
    author=about["__author__"],
    author_email=about["__author_email__"],
    url=about["__url__"],
    license=about["__license__"],
    packages=[
        "maze_astar",
        "maze_astar.grid",
        "maze_astar.grid.a_star",
        "maze_astar.solving",
        "maze_astar.observer",
    ],
    py_modules=["solver"],
    install_requires=[
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    test_suite="tests",
    python_requires=">=3.10",
    classifiers=[
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
)
