from setuptools import setup, find_packages

setup(
    name="ropm",
    version="0.1.0",
    description="ropm: one front-end for Flatpak and the system package manager",
    author="Ayaan Eusufzai",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=["rich"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "ropm=ropm.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
    ],
)
