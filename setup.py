from setuptools import setup, find_packages

setup(
    name='AppHelpers',
    version='0.1.dev0',
    description='Stateless helpers: HTML tag whitelisting, text, colors',
    author='Vladimir Magamedov',
    author_email='vladimir@magamedov.com',
    packages=find_packages(exclude=['tests', 'tests.*']),
    license='BSD',
    install_requires=['lxml', 'funcparserlib', 'PyYAML'],
    extras_require={
        'cli': ['click'],
        'test': ['pytest', 'click'],
    }
)
