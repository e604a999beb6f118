"""Setup file for the reviewvec package."""

from setuptools import setup, find_packages

setup(
    name="reviewvec",
    version="0.1.0",
    description="Synonym and analogy queries over a Word2Vec model trained on movie reviews",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "gensim>=4.3",
        "numpy",
        "scipy",
        "pandas",
        "tqdm",
        "spacy>=3.0",
        "scikit-learn",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "reviewvec=reviewvec.cli:main",
        ],
    },
)
