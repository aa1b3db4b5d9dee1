import pathlib
import setuptools


def readme():
    readmePath = pathlib.Path(__file__).parent / "README.md"
    if readmePath.is_file():
        with readmePath.open("r") as readmeFile:
            return readmeFile.read()
    return "No readme for local builds."


def version():
    versionPath = pathlib.Path(__file__).parent / "VERSION"
    with versionPath.open("r") as versionFile:
        return versionFile.read().strip()


def requirementsFile(name=None):
    filename = f"requirements-{name}.txt" if name else "requirements.txt"
    reqPath = pathlib.Path(__file__).parent / filename
    with reqPath.open("r") as reqFile:
        return reqFile.read().strip().splitlines()


setuptools.setup(
    name="python-linkshort",
    version=version(),
    description="Desktop form and CLI for shortening links through TinyURL",
    long_description=readme(),
    long_description_content_type="text/markdown",
    license="MIT",
    packages=setuptools.find_namespace_packages(
        include=["linkshort", "linkshort.*"]
    ),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=requirementsFile(),
    extras_require={"test": requirementsFile("test")},
    classifiers=[
        "Environment :: Console",
        "Environment :: X11 Applications",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.9",
    ],
)
