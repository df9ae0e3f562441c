from setuptools import setup

setup(
    name='ConstraintSatisfactionProblem',
    version='0.2.0',
    packages=['csp'],
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest'],
    },
    url='https://github.com/jaywritescode/ConstraintSatisfactionProblem',
    license='MIT',
    author='jay harris',
    author_email='jaywritescode@users.noreply.github.com',
    description='A Python framework for solving constraint satisfaction problems.'
)
