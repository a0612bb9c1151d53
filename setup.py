from setuptools import find_packages, setup

setup(
    name='clubdata',
    version='1.0.0',
    author='jasonsa19',
    description='Club data (phone, email, address) settings page for the Django admin, with a template tag to render them',
    packages=find_packages(include=['clubdata', 'clubdata.*']),
    package_data={
        'clubdata': ['templates/admin/clubdata/clubdata/*.html', 'static/clubdata/*.css'],
    },
    zip_safe=False,
    platforms='any',
    license='MIT',
    python_requires='>=3.8',
    install_requires=[
        'django>=4.2',
        'djangorestframework',
        'django-guardian',
        'pyyaml',
        'click',
    ],
    extras_require={
        'test': ['pytest', 'pytest-django'],
    },
    entry_points={
        'console_scripts': ['clubdata = clubdata.cli:main'],
    },
)
