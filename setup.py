import os
from glob import glob

from setuptools import setup

package_name = 'keyboard_teleop'

setup(
    name=package_name,
    version='0.1.0',
    packages=[package_name],
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        (os.path.join('share', package_name, 'launch'), glob('launch/*.py')),
    ],
    install_requires=['setuptools'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='Ashwin',
    maintainer_email='ashwinsivakumar.in@gmail.com',
    description='Keyboard teleop publishing Twist, with motor relay toggle',
    license='Apache License 2.0',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'teleop_keyboard = keyboard_teleop.teleop_keyboard:main',
        ],
    },
)
