"""
python -m build
twine upload dist/*
"""

from setuptools import setup, find_packages


def modelsettings_setup():
    with open("requirements.txt", "rt") as fp:
        install_requires = fp.read().strip().split("\n")

    version = "1.0.0"

    setup(
        name="modelsettings",
        packages=find_packages(exclude=["tests", "tests.*"]),
        version=version,
        license="MIT",
        description="modelsettings : dot path settings for SQLAlchemy models",
        long_description=open("README.rst").read(),
        keywords=["SqlAlchemy", "Flask", "settings", "options", "JSON"],
        python_requires=">=3.8, <4",
        install_requires=install_requires,
        classifiers=[
            "Development Status :: 3 - Alpha",
            "Intended Audience :: Developers",
            "Framework :: Flask",
            "Topic :: Software Development :: Libraries",
            "Programming Language :: Python :: 3",
        ],
        extras_require={"redis": ["redis>=4.0"], "test": ["pytest>=7.0"]},
    )


modelsettings_setup()  # pragma: no cover
