from setuptools import setup, find_packages

setup(name='flashdrill',
      version='0.1.0',
      description='drill flashcards with typed answers',
      author='gront',
      packages=find_packages(exclude=['tests', 'tests.*']),
      install_requires=[
          'pandas',
          'Unidecode',
      ],
      extras_require={
          'test': ['pytest'],
      },
     )
