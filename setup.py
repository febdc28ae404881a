from setuptools import find_packages, setup

# load VERSION from file
exec(open('unmint/version.py').read())

requires = [
    'base58>=2.0.1',
    'pure25519==0.0.1',
    'pynacl>=1.4.0',
    'solana>=0.30.2,<0.40',
    'solders>=0.18.1',
]

tests_requires = [
    'pytest>=5.4.3',
    'pytest-cov>=2.10.0',
    'pytest-mock>=3.2.0',
    'pytest-timeout>=1.4.1',
]

setup(
    name='sol-unmint',
    version=VERSION,
    description='Send SPL tokens and close token accounts on Solana',
    license='MIT',
    packages=find_packages(include=["unmint", "unmint.*"]),
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords=["solana", "spl", "token", "token-2022", "blockchain", "cryptocurrency"],
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    install_requires=requires,
    extras_require={'test': tests_requires},
    python_requires='>=3.8'
)
