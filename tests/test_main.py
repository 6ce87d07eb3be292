import pytest

from tcpclient.main import get_client, get_path, main


@pytest.fixture
def clean_dir(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("API_BASE_URL", raising=False)
    return monkeypatch


@pytest.mark.parametrize("argv", [[], None])
def test_main_prints_start_message(capsys, argv):
    assert main(argv) == 0
    assert capsys.readouterr().out == "Starting client...\n"


def test_main_rejects_unknown_option(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2
    assert capsys.readouterr().out == ""


def test_get_path_reads_environment(clean_dir):
    clean_dir.setenv("API_BASE_URL", "http://api.example.com")
    assert get_path().login_url() == "http://api.example.com/authentication/login"


def test_get_path_default(clean_dir):
    assert get_path().base_url == "http://127.0.0.1:7878"


def test_get_client_gives_independent_sessions():
    first, second = get_client(), get_client()
    assert first is not second
    assert len(first.cookies) == 0