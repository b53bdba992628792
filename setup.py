"""Install the API client portal."""

from setuptools import setup, find_packages

setup(
    name='client-portal',
    version='0.1.0',
    packages=find_packages(exclude=['*test*']),
    install_requires=[
        "flask",
        "flask-sqlalchemy",
        "sqlalchemy",
        "wtforms",
        "werkzeug",
        "passlib",
        "authlib",
        "python-json-logger"
    ],
    extras_require={
        "test": ["pytest"]
    },
    zip_safe=False
)
