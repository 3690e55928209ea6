from setuptools import setup, find_packages
import re

# Read version from drivelink/__init__.py
with open('drivelink/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='drivelink',
    version=version,
    packages=find_packages(include=['drivelink', 'drivelink.*']),
    install_requires=[
        'google-api-python-client',
        'google-auth',
        'google-auth-oauthlib',
        'python-dotenv',
        'click>=8.0',
        'PyYAML',
        'mcp>=1.0.0,<2',
    ],
    extras_require={
        'mcp': ['mcp>=1.0.0,<2'],
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'drivelink=drivelink.cli.__main__:main',
            'drivelink-mcp=drivelink.mcp.server:run_server',
        ],
    },
    author='CLI Developer',
    description='drivelink - Google Drive API connector with endpoint/producer/consumer model, CLI, and MCP server.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
