import logging
import os
import pathlib
import subprocess
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]

sys.path.append(str(ROOT))

import cbase32
import consts
import llog

HOST_SCRIPT = """
import logging, sys
handler = logging.StreamHandler(sys.stdout)
root = logging.getLogger()
root.addHandler(handler)
root.setLevel(logging.DEBUG)
import cbase32
print(handler in root.handlers, root.level,
    logging.getLogger("cbase32").level)
"""


def _run_host(env):
    result = subprocess.run(
        [sys.executable, "-c", HOST_SCRIPT], cwd=str(ROOT), env=env,
        stdout=subprocess.PIPE, check=True, universal_newlines=True)
    return result.stdout.split()


def test_init_is_idempotent():
    assert llog.logging_initialized
    llog.init()
    assert llog.logging_initialized


def test_import_keeps_host_logging():
    env = dict(os.environ)
    env.pop(consts.LOGGING_CONFIG_ENV, None)

    kept, root_level, codec_level = _run_host(env)

    assert kept == "True"
    assert int(root_level) == logging.DEBUG
    assert int(codec_level) == logging.NOTSET


def test_config_file_from_environment():
    env = dict(os.environ)
    env[consts.LOGGING_CONFIG_ENV] = str(ROOT / "logging.ini")

    _, root_level, codec_level = _run_host(env)

    assert int(root_level) == logging.WARNING
    assert int(codec_level) == logging.INFO


def test_codec_logs_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="cbase32"):
        decoder = cbase32.Decoder()
        decoder.ingest("zzz")
        decoder.flush()

    messages = [r.getMessage() for r in caplog.records if r.name == "cbase32"]
    assert "Decoded 3 chars; holding 7 bits." in messages
    assert "Dropping 7 trailing bits." in messages
