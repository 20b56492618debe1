from glob import glob
from setuptools import setup


setup(
    name='rpn4',
    version='1.0.0',
    description='Four register (X, Y, Z, T) RPN calculator engine',
    install_requires=[
        'regex',
        'prompt_toolkit',
        'numpy',
    ],
    packages=['rpn4'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
