# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

from setuptools import find_packages, setup

setup(
    name="onnxlate",
    version="0.1.0",
    description="ONNX tensor decoding and operator evaluation",
    license="Apache-2.0",
    packages=find_packages(include=["onnxlate", "onnxlate.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "onnx",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
)
