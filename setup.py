from setuptools import setup, find_packages

setup(
    name="MunsellSpectrum",
    version="0.1.0",
    description="Munsell color space modelling: table-backed Munsell <-> RGB conversion, harmonies and mixing weights",
    packages=find_packages(include=["MunsellSpectrum", "MunsellSpectrum.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "colour-science>=0.4.4",
        "numpy>=1.26",
        "pandas>=2.2.3",
        "Pillow>=11.0.0",
        "setuptools>=75.1.0",
        "tqdm>=4.67.0",
    ],  # Core dependencies
    extras_require={
        "test": ["pytest>=8.0"],
    },
)
