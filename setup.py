from setuptools import find_packages, setup

setup(
    name="luarocks-setup",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=["argcomplete", "jinja2", "packaging", "pyyaml", "requests", "tqdm"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["luarocks-setup=luarocks_setup.cli:main"]},
)
