from setuptools import setup,find_packages
import os
import re

def read(f):
    return open(f, 'r', encoding='utf-8').read()

def get_version(package):
    """
    Return package version as listed in `__version__` in `init.py`.
    """
    init_py = open(os.path.join(package, '__init__.py')).read()
    return re.search("__version__ = ['\"]([^'\"]+)['\"]", init_py).group(1)


version = get_version('jsontodo')

setup(
	name="jsontodo",
	version=version,
	url='',
	license='BSD',
	description='Todo list HTTP API backed by a single JSON file.',
	long_description=read('README.md'),
	long_description_content_type='text/markdown',
	author='Luccas Correa',
	author_email='luccascorrea@estudio89.com.br',
	packages=find_packages(exclude=['tests*']),
	include_package_data=True,
	install_requires=[
		"filelock>=3.11",
		"fastapi>=0.100",
		"pydantic>=2.0",
		"uvicorn>=0.22",
	],
    extras_require={
        "test": ["pytest >= 7.0", "httpx >= 0.24"],
    },
	entry_points={
		"console_scripts": ["jsontodo=jsontodo.server:main"],
	},
	python_requires=">=3.8",
	classifiers=[
        'Environment :: Web Environment',
        'Framework :: FastAPI',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Internet :: WWW/HTTP',
	]
)
