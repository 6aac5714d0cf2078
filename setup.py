from setuptools import setup, find_packages

setup(
    name="recipemd-parser",
    version="1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="A parser for RecipeMD, a Markdown dialect for recipes.",
    python_requires=">=3.8",
    install_requires=[
        "markdown-it-py>=2.2.0",
        "marko>=1.0.0",
        "peggie>=0.2.0",
    ],
    extras_require={
        "test": ["pytest>=6.2"],
    },
    entry_points={
        "console_scripts": [
            "recipemd=recipemd.scripts.recipemd:main",
        ],
    },
)
