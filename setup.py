from setuptools import setup, Extension, find_packages
from Cython.Build import cythonize

# Define the Cython extensions
extensions = [
    Extension(
        "kmer_count.kmers",
        ["src/kmer_count/kmers.py"],
        include_dirs=[],
        language="c",
    ),
]

setup(
    name="kmer_count",
    version="0.1.0",
    description="Count overlapping 4-mers in DNA sequence files",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=["numpy"],
    extras_require={
        "plot": ["matplotlib"],
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["count-kmers=kmer_count.__main__:run"],
    },
    ext_modules=cythonize(
        extensions,
        compiler_directives={
            'language_level': 3,
            'boundscheck': True,  # Enable bounds checking for safety
            'wraparound': False,
            'cdivision': True,
            'nonecheck': False,
        }
    ),
    zip_safe=False,
)
