from setuptools import find_packages, setup

setup(
    name="superkeyloader",
    version="0.2.0",
    license="MIT",

    author="Alessandro Biondi",
    author_email="alessandro@biondi.me",
    python_requires=">=3.11",
    description="Download your GitHub or GitLab public SSH keys and append "
                "them to an authorized_keys file.",

    url='https://github.com/biosan/superkeyloader',

    packages=find_packages(exclude=('tests', 'tests.*')),

    install_requires=[
        "Click>=8.1,<9.0",
        "httpx>=0.27,<1.0",
        "pydantic>=2.7,<3.0",
        "pydantic-settings>=2.3,<3.0",
        "structlog>=24.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },

    test_suite="tests",

    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
    entry_points={
        'console_scripts': [
            'superkeyloader = superkeyloader.cli:main',
        ],
    },
)
