from setuptools import setup, find_packages

setup(
    name="cookdown",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"cookdown": ["templates/*.html", "templates/*.css"]},
    description="Render structured Cooklang recipes as markdown and HTML.",
    install_requires=["marko>=2.0", "lxml", "jinja2"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "cookdown=cookdown.scripts.cookdown:main",
        ],
    },
)
