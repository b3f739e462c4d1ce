from styx.headers import HeaderData, describe


def _sample():
    return HeaderData(
        method="GET",
        path="/path/to/file",
        version="HTTP/1.1",
        headers=[("Connection", "keep-alive"), ("User-Agent", "Test")],
    )


def test_lookup_finds_values():
    data = _sample()
    assert data.lookup("Connection") == "keep-alive"
    assert data.lookup("User-Agent") == "Test"


def test_lookup_missing_returns_none():
    assert _sample().lookup("Content-Length") is None


def test_lookup_ignores_case():
    assert _sample().lookup("connection") == "keep-alive"


def test_lookup_returns_first_duplicate():
    data = HeaderData(headers=[("Host", "a.example.com"), ("Host", "b.example.com")])
    assert data.lookup("Host") == "a.example.com"


def test_describe_none():
    assert describe(None) == "NULL\n"


def test_describe_full():
    data = HeaderData("GET", "/path/to/file", "HTTP/1.1", [("Connection", "keep-alive")])
    assert describe(data) == (
        "header_data: {\n"
        '\tmethod: "GET"\n'
        '\tpath: "/path/to/file"\n'
        '\tversion: "HTTP/1.1"\n'
        "\theaders: {\n"
        '\t\t"Connection": "keep-alive"\n'
        "\t}\n"
        "}\n"
    )


def test_describe_missing_fields_show_null():
    text = describe(HeaderData())
    assert '\tmethod: "NULL"\n' in text
    assert text.endswith("\theaders: {\n\t}\n}\n")


def test_describe_lists_every_header():
    data = _sample()
    text = describe(data)
    for key, value in data.headers:
        assert f'\t\t"{key}": "{value}"\n' in text