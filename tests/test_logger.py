import io

from ethrl.core.logger import MAX_LENGTH, Logger, log


def test_log_formats_arguments_into_stream():
    stream = io.StringIO()
    Logger(stream).log("Error creating sound %s.", "boom.wav")
    assert stream.getvalue() == "Error creating sound boom.wav.\n"


def test_log_without_arguments_leaves_percent_signs():
    stream = io.StringIO()
    Logger(stream).log("100% done")
    assert stream.getvalue() == "100% done\n"


def test_disabled_logger_writes_nothing():
    stream = io.StringIO()
    Logger(stream, enabled=False).log("hidden %d", 1)
    assert stream.getvalue() == ""


def test_long_messages_are_truncated():
    stream = io.StringIO()
    Logger(stream).log("%s", "x" * (MAX_LENGTH * 2))
    assert len(stream.getvalue().rstrip("\n")) == MAX_LENGTH


def test_module_log_writes_to_stdout(capsys):
    log("Error could not find key %s", "Coin")
    assert capsys.readouterr().out == "Error could not find key Coin\n"