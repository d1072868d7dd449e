from glob import glob
from setuptools import setup


setup(
    name='chaincalc',
    use_scm_version={
        'fallback_version': '0.1.0',
    },
    description='Chaining four-function calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['chaincalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
