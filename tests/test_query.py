import logging

from fooster.query import query


def test_flat():
    assert query.parse_query('a=1&b=2') == {'a': '1', 'b': '2'}


def test_flat_no_value():
    assert query.parse_query('a&b=2') == {'a': '', 'b': '2'}


def test_flat_empty_value():
    assert query.parse_query('a=&b=2') == {'a': '', 'b': '2'}


def test_flat_first_equals():
    assert query.parse_query('a=b=c') == {'a': 'b=c'}


def test_flat_last_write_wins():
    assert query.parse_query('a=1&a=2') == {'a': '2'}


def test_flat_decoded():
    assert query.parse_query('na%6De=va%6Cue&%41=%42') == {'name': 'value', 'A': 'B'}


def test_flat_decoded_separators():
    assert query.parse_query('a%3Db=c%26d') == {'a=b': 'c&d'}


def test_flat_malformed_escape():
    assert query.parse_query('a=%zz&b=%') == {'a': '%zz', 'b': '%'}


def test_flat_brackets_literal():
    assert query.parse_query('x[]=1&x[k]=2') == {'x[]': '1', 'x[k]': '2'}


def test_flat_faithful_empty_token():
    assert query.parse_query('a=1&&b=2', faithful=True) == {'a': '1', 'b': '2'}


def test_flat_permissive_empty_token():
    assert query.parse_query('a=1&&b=2', faithful=False) == {'a': '1', 'b': '2', '': ''}


def test_flat_faithful_empty_name():
    assert query.parse_query('=1&b=2', faithful=True) == {'b': '2'}


def test_flat_permissive_empty_name():
    assert query.parse_query('=1&b=2', faithful=False) == {'': '1', 'b': '2'}


def test_flat_faithful_empty():
    assert query.parse_query('', faithful=True) == {}
    assert query.parse_query('&&', faithful=True) == {}


def test_flat_permissive_empty():
    assert query.parse_query('', faithful=False) == {'': ''}


def test_flat_faithful_leading_trailing():
    assert query.parse_query('&a=1&', faithful=True) == {'a': '1'}


def test_flat_module_setting(monkeypatch):
    monkeypatch.setattr(query, 'faithful', False)

    assert query.parse_query('a=1&&b=2') == {'a': '1', 'b': '2', '': ''}

    monkeypatch.setattr(query, 'faithful', True)

    assert query.parse_query('a=1&&b=2') == {'a': '1', 'b': '2'}


def test_flat_independent_results():
    first = query.parse_query('a=1')
    first['b'] = '2'

    assert query.parse_query('a=1') == {'a': '1'}


def test_flat_log_dropped(caplog):
    log = logging.getLogger('test_query')
    log.setLevel(logging.DEBUG)

    with caplog.at_level(logging.DEBUG, logger='test_query'):
        assert query.parse_query('=1', faithful=True, log=log) == {}

    assert any('empty name' in record.getMessage() for record in caplog.records)


def test_mklog():
    log = query.mklog('query')

    assert log is logging.getLogger('query')
    assert any(isinstance(handler, logging.StreamHandler) for handler in log.handlers)


def test_mklog_default():
    assert query.mklog() is logging.getLogger('query')


def test_default_log():
    assert query.default_log is logging.getLogger('query')
