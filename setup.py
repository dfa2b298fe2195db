from setuptools import setup, find_packages
from glob import glob

with open('README.md') as f:
    long_description = f.read()

setup(
    name='fraglog',
    version='0.1.0',
    description='Extract the lines of a chronologically ordered log '
                'that fall in a time period',
    license='Apache-2.0',
    keywords='log extract period timestamp range',
    packages=find_packages(include=['fraglog', 'fraglog.*']),
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Topic :: System :: Logging',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: MacOS :: MacOS X',
        'Operating System :: Microsoft :: Windows',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3'
    ],
    python_requires='>=3.10',
    install_requires=[],
    extras_require={
        'test': [
            'pytest'
        ]
    },
    scripts=glob('bin/*')
)
