from setuptools import setup,find_packages
import os
import re

def read(f):
    with open(f, 'r', encoding='utf-8') as fobj:
        return fobj.read()

def get_version(package):
    """
    Return package version as listed in `__version__` in `init.py`.
    """
    with open(os.path.join(package, '__init__.py')) as fobj:
        init_py = fobj.read()
    return re.search("__version__ = ['\"]([^'\"]+)['\"]", init_py).group(1)


version = get_version('todolist')

setup(
	name="todolist",
	version=version,
	url='',
	license='BSD',
	description='In-memory todo list service with a JSON API.',
	long_description=read('README.md'),
	long_description_content_type='text/markdown',
	packages=find_packages(exclude=['tests*']),
	package_data={"todolist": ["static/*"]},
	include_package_data=True,
	install_requires=["flask>=2.2"],
    extras_require={
        "test": "pytest >= 7.0",
    },
    entry_points={
        "console_scripts": ["todolist=todolist.__main__:main"],
    },
	python_requires=">=3.8",
	classifiers=[
        'Environment :: Web Environment',
        'Framework :: Flask',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Internet :: WWW/HTTP',
	]
)
