from setuptools import setup

setup(
    name='softlayerops',
    version='0.1.0',
    packages=['softlayerops', 'softlayerops.objects'],
    scripts=['order_storage.py', 'list_virtual_machines.py'],
    license='Apache-2.0',
    description='Handy tools to operate a SoftLayer account',
    python_requires='>=3.6',
    install_requires=[
        'click',
        'click-log',
        'click-spinner',
        'humanfriendly',
        'SoftLayer',
        'slack-webhook',
        'tabulate'
    ],
    extras_require={
        'test': [
            'pytest',
            'testfixtures'
        ]
    }
)
