"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from unittest.mock import MagicMock

import pytest

from fileshell.container import DependencyContainer
from fileshell.entities.session import Session
from fileshell.ui.console import create_console


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Layout:
        test1.txt, test2.py, subdir/test3.md, subdir/nested/test1.txt

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = os.path.realpath(temp_dir)
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file and a nested directory
        subdir = os.path.join(temp_dir, "subdir")
        nested = os.path.join(subdir, "nested")
        os.makedirs(nested)

        with open(os.path.join(subdir, "test3.md"), "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        with open(os.path.join(nested, "test1.txt"), "w") as f:
            f.write("nested copy")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with a mocked logger for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def output():
    """In-memory buffer the shell console writes to."""
    return io.StringIO()


@pytest.fixture
def console(output):
    """Plain rich console writing to the output buffer."""
    return create_console(pretty=False, file=output)


@pytest.fixture
def dispatcher(dependency_container, console, temp_directory):
    """Dispatcher wired to the real filesystem, starting in temp_directory."""
    return dependency_container.create_dispatcher(
        session=Session(temp_directory), console=console
    )
