import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="PyViterbi",
    version="0.1.0",
    author="Peter Steiner",
    author_email="peter.steiner@tu-dresden.de",
    description="A scikit-learn-compatible Viterbi decoder for discrete "
                "Hidden Markov Models in Python",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 2 - Pre-Alpha",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Intended Audience :: Science/Research",
    ],
    keywords='PyViterbi, Hidden Markov Model, Viterbi',
    install_requires=[
        'scikit-learn>=1.0',
        'numpy>=1.18.1',
        'joblib>=0.13.2',
        'pandas>=1.0.0',
        'matplotlib',
        'seaborn',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.7',
)
