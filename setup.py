from setuptools import setup, find_packages

setup(
    name="linemark",
    author="linemark contributors",
    description="Labeled span diagrams for one line of source text",
    long_description=open("README.md", encoding="UTF-8").read(),
    long_description_content_type="text/markdown",
    use_scm_version={"fallback_version": "0.1.0"},
    packages=find_packages(include=["linemark", "linemark.*"]),
    python_requires=">=3.9",
    classifiers = [
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires = ["html5tagger>=1.2.1"],
    extras_require = {
        "test": ["pytest", "coverage", "beautifulsoup4"],
    },
    package_data = {"linemark": ["style.css"]},
    include_package_data = True,
)
