"""
Setup file for demo_api
In-memory users/posts REST API with diagnostic test endpoints
"""

from setuptools import setup, find_packages

setup(
    name="demo_api",
    version="1.0.0",
    packages=find_packages(include=["demo_api", "demo_api.*"]),
    package_data={"demo_api": ["static/*"]},
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        'flask>=2.3.0',
        'flask-cors>=4.0.0',
        'python-dotenv>=1.0.0',
    ],
    extras_require={
        'test': ['pytest>=7.0', 'requests>=2.31.0'],
    },
    entry_points={
        'console_scripts': [
            'demo-api=demo_api.__main__:main',
        ],
    },
)
