from setuptools import setup, find_namespace_packages

install_requires = ['numpy', 'absl-py', 'jax', 'jaxlib', 'hypothesis']

setup(
    name='fixedpoint',
    version='0.1.0',
    packages=find_namespace_packages(
        include=['fixedpoint', 'fixedpoint.*'],
        exclude=["*.tests", "*.tests.*", "tests.*", "tests"]
    ),
    url='',
    license='',
    author='',
    author_email='',
    description='Fixed point iteration with iteration and value limits.',
    install_requires=install_requires,
)
