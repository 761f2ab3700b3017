import setuptools

setuptools.setup(
    name="skicomb",
    version="0.1.0",
    description="Typed SKI combinator terms with an evaluator and printer",
    packages=setuptools.find_packages(include=["skicomb", "skicomb.*"]),
    python_requires=">=3.8",
    install_requires=[
        "immutables",
        "parsable",
    ],
    extras_require={
        "test": [
            "hypothesis",
            "pytest",
        ],
    },
)
