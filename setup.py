from setuptools import setup, find_packages

setup(
    name="botcmd",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0",
        "structlog",
        "python-dotenv",
        "PyYAML",
    ],
    extras_require={
        "dev": [
            "pytest",
            "hypothesis",
        ],
    },
    # Add other metadata as needed
    author="Your Name",
    author_email="your.email@example.com",
    description="Text-command interpreter for chat bots.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/botcmd",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
