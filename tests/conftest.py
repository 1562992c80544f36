"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

EXAMPLE_TOML = textwrap.dedent(r"""
    [scripts]
    ant = [
        {command = 'source', env = 'jdk17'},
        {command = 'env', key = 'ANT_HOME', value = 'C:\portable\ant-1.9', mode = 'PATH'},
        {command = 'env', key = 'PATH', value = '%ANT_HOME%\bin', mode = 'PREPEND_PATH'}
    ]
    cmake = [
        {command = 'env', key = 'PATH', value = 'C:\Program Files (x86)\CMake 2.8\bin', mode = 'PREPEND_PATH'}
    ]
    jdk17 = [
        {command = 'env', key = 'JAVA_HOME', value = 'C:\Program Files\Java\jdk17', mode = 'PATH'},
        {command = 'env', key = 'JRE_HOME', value = 'C:\Program Files\Java\jdk17\jre', mode = 'PATH'},
        {command = 'env', key = 'PATH', value = '%JAVA_HOME%\jre\bin', mode = 'PREPEND_PATH'},
        {command = 'env', key = 'PATH', value = '%JAVA_HOME%\bin', mode = 'PREPEND_PATH'}
    ]
    openssl32 = [
        {command = 'env', key = 'PATH', value = 'C:\OpenSSL-Win32\bin', mode = 'PREPEND_PATH'},
        # for mingw
        {command = 'env', key = 'CPATH', value = 'C:\OpenSSL-Win32\include', mode = 'PREPEND_PATH'},
        {command = 'env', key = 'LIBRARY_PATH', value = 'C:\OpenSSL-Win32\lib', mode = 'APPEND_PATH'},
        {command = 'env', key = 'OPENSSL_CONF', value = 'C:\OpenSSL-Win32\bin\openssl.cfg', mode = 'SET'}
    ]
    maven = [
        {command = 'source', env = 'jdk17'},
        {command = 'env', key = 'M2_HOME', value = 'C:\portable\maven', mode = 'PATH'},
        {command = 'env', key = 'PATH', value = '%M2_HOME%\bin', mode = 'PREPEND_PATH'}
    ]
""")


@pytest.fixture
def example_config(tmp_path: Path) -> Path:
    """Write the example portable_env.toml into a temp directory."""
    path = tmp_path / "portable_env.toml"
    path.write_text(EXAMPLE_TOML, encoding="utf-8")
    return path


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Return an (empty) output root directory."""
    root = tmp_path / "out"
    root.mkdir()
    return root
