#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst', encoding='utf-8') as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst', encoding='utf-8') as history_file:
    history = history_file.read()

requirements = ['Click>=7.0',
                'python-dotenv',
                'python-dateutil',
                'requests>=2.27',
                ]

test_requirements = ['pytest>=6.0', ]


setup(
    author="Michael Dereszynski",
    author_email='mlderes@hotmail.com',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: End Users/Desktop',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Natural Language :: English',
        'Natural Language :: Hindi',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Environment :: Console',
    ],
    description="Current weather and practical advice for any city, from the Open-Meteo services",
    entry_points={
        'console_scripts': [
            'city-weather=city_weather_advice.cli:main',
            'city-weather-interactive=city_weather_advice.cli:interactive',
        ],
    },
    install_requires=requirements,
    extras_require={'test': test_requirements},
    license="GNU General Public License v3",
    long_description=readme + '\n\n' + history,
    include_package_data=True,
    keywords='city_weather_advice weather open-meteo',
    name='city_weather_advice',
    packages=find_packages(include=['city_weather_advice']),
    python_requires='>=3.8',
    test_suite='tests',
    tests_require=test_requirements,
    url='https://github.com/mlderes/city_weather_advice',
    version='0.1.0',
    zip_safe=False,
)
