import os
from setuptools import setup, find_packages


def get_version():
    ns = {}
    with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'jsonexplorer/version.py')) as f:
        exec(f.read(), ns)
    return ns['__version__']

readme_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'README.md')
with open(readme_path, 'r', encoding='utf-8') as f:
    long_description = f.read()


setup(
    name='jsonexplorer',
    version=get_version(),
    packages=find_packages(include=['jsonexplorer', 'jsonexplorer.*']),
    install_requires=[
        'jsonpath-ng>=1.5'
    ],
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': ['jsonexplorer=jsonexplorer.__main__:main']
    },
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
