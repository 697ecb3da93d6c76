from setuptools import setup, find_packages
import codecs
import os

here = os.path.abspath(os.path.dirname(__file__))

with codecs.open(os.path.join(here, "README.md"), encoding="utf-8") as fh:
    long_description = "\n" + fh.read()

VERSION = '0.1.0'
DESCRIPTION = 'Closed triangle meshes of ovoid solids of revolution'

# Setting up
setup(
    name="pyovoid",
    version=VERSION,
    description=DESCRIPTION,
    long_description_content_type="text/markdown",
    long_description=long_description,
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=['numpy', 'matplotlib'],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['pyovoid=pyovoid.cli:main'],
    },
    keywords=['python', 'mesh', 'ovoid', 'egg', 'surface of revolution', '3d'],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
        "Topic :: Multimedia :: Graphics :: 3D Modeling",
        "Operating System :: OS Independent",
    ]
)
