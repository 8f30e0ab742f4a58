from setuptools import setup, find_packages

with open("README.md", "r") as f:
    readme = f.read()

setup(
    name='ga4channel',
    version='0.1.0',
    author='Makoto Shimizu',
    author_email='aa.analyst.ga@gmail.com',
    description='Predict GA4 default channel groups from UTM source, medium and campaign.',
    long_description=readme,
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={'ga4channel': ['data/*.json']},
    install_requires=[
        'pandas',
        'requests',
    ],
    extras_require={
        'test': ['pytest', 'numpy'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Topic :: Internet",
    ],
    python_requires='>=3.9',
)
