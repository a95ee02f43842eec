# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="structuregen",
    version="1.0.0",
    description="Generate a Markdown directory tree of a project",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["structuregen*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'generate-structure=structuregen.main:main',
            'structuregen=structuregen.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
