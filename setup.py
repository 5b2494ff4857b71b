import setuptools

with open('README.md') as f:
    long_description = f.read()

setuptools.setup(
    name='chemexpand',
    version='0.1.0',
    description='Expand chemical formulas with nested groups and sum up element values',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(include=['chemexpand', 'chemexpand.*']),
    include_package_data=True,
    package_data={
        'chemexpand': ['data/*']
    },
    entry_points={
        'console_scripts': ['chemexpand=chemexpand.cli:main']
    },
    python_requires='>=3.6',
    install_requires=[
        'numpy',
        'pandas',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'License :: OSI Approved :: GNU Lesser General Public License v2 or later (LGPLv2+)',
        'Operating System :: OS Independent'
    ]
)
