from setuptools import setup, find_packages

setup(
    name="linecalc",
    version="0.1.0",
    description="linecalc: line-oriented assignment calculator (lexer, parser, evaluator)",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    author="linecalc Project",
    python_requires=">=3.9",
    packages=find_packages(),
    entry_points={
        "console_scripts": [
            "linecalc=linecalc.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Interpreters",
    ],
)
