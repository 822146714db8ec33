import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="flacmeta",
    version="1.0.0",
    author="x1ppy",
    author_email="",
    packages=[
        'flacmeta',
        'flacmeta.blocks',
    ],
    entry_points={
        'console_scripts': [
            'flacmeta = flacmeta.__main__:main',
        ],
    },
    description="decode the metadata blocks of FLAC files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/x1ppy/flacmeta",
    python_requires='>=3.6',
    install_requires=[
        'construct',
    ],
    extras_require={
        'test': [
            'pytest>=7',
        ],
    },
)
