from itertools import chain
from setuptools import setup

extras = {
    'test': ['pytest>=3.10', 'flake8', 'coverage', 'numpy'],
    'doc': ['sphinx', 'sphinx-autobuild']
}
# 'all' includes all of the above
extras['all'] = list(chain(*extras.values()))

setup(name='pyset-collection',
      version='2024.0.0',
      description='Unordered set collection with set algebra, combinators and a thread-safe variant.',
      author='The pyset developers',
      packages=['pyset'],
      package_dir={'pyset': 'pyset'},
      python_requires='>=3.9',
      install_requires=[],
      extras_require=extras
      )
