"""Install NMedia users package."""

from setuptools import setup, find_packages

setup(
    name='nmedia-users',
    version='0.1.0',
    packages=[f'nmedia.{package}' for package
              in find_packages('./nmedia', exclude=['*test*'])],
    install_requires=[
        "bcrypt",
        "flask",
        "flask-sqlalchemy",
        "python-json-logger",
        "pytz",
        "sqlalchemy",
        "werkzeug",
    ],
    extras_require={
        "test": [
            "hypothesis",
            "mimesis",
            "pytest",
        ],
    },
    zip_safe=False
)
