import os

from setuptools import setup


ver_path = os.path.join(os.path.dirname(__file__), 'pngchunktype', 'version.py')
with open(ver_path) as ver_file:
    __version__ = ''
    exec(compile(ver_file.read(), ver_path, 'exec'))


requires = ['attrs']

tests_require = ['pytest', 'hypothesis']

classifiers = [
    'Programming Language :: Python :: 3',
    'Topic :: Multimedia :: Graphics',
]

setup(
    name='pngchunktype',
    version=__version__,
    description='PNG chunk type codes and their property bits',
    classifiers=classifiers,
    author='Colin Dunklau',
    author_email='colin.dunklau@gmail.com',
    url='',
    keywords='png chunk',
    packages=['pngchunktype', 'pngchunktype.tests'],
    include_package_data=True,
    zip_safe=False,
    install_requires=requires,
    extras_require={'test': tests_require},
    entry_points={
        'console_scripts': ['pngchunktype = pngchunktype.main:main'],
    },
)
