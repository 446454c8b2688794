import setuptools

with open('README.md', 'rt') as f:
    long_description = f.read()

setuptools.setup(
    name='numtower',
    version='0.0.0',
    description='arbitrary precision numeric tower: unbounded integers, exact rationals and complex numbers',
    long_description=long_description,
    license='MIT',
    python_requires='>=3.8',
    install_requires=['numpy>=1.23.0', 'gmpy2>=2.1.2'],
    extras_require={
        'test': ['pytest'],
    },
    packages=['numtower', 'numtower.core', 'numtower.arithmetic'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Operating System :: POSIX :: Linux',
        'License :: OSI Approved :: MIT License',
    ],
)
