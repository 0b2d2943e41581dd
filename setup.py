from setuptools import setup, find_packages


setup(
    name="git_semver",
    version="0.1.0",
    description="Derive a semantic version string from git tags and describe output",
    packages=find_packages(exclude=["tests*", "*.tests", "*.tests.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "dev": ["pytest>=7.0"],
        "all": [
            "git_semver[dev]",
        ],
    },
    entry_points={
        "console_scripts": [
            "git-semver=git_semver.cli:main",
        ],
    },
    include_package_data=True,
)
