from glob import glob
from setuptools import setup


setup(
    name='hprpn',
    version='0.1.0',
    description='HP style four register RPN calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['hprpn'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
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
