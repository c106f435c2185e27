"""
The primary entry point to the application.
"""
from carrental.cli import run

if __name__ == '__main__':
    run()
