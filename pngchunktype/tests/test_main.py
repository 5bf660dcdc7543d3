import logging


def run_main(argv):
    from pngchunktype.main import main

    return main(argv)


def messages(caplog, level):
    return [r.getMessage() for r in caplog.records if r.levelno == level]


def test_registered_code(caplog):
    caplog.set_level(logging.DEBUG)
    assert run_main(['IHDR']) == 0
    [message] = messages(caplog, logging.INFO)
    assert message == (
        'IHDR (image header): critical=True public=True '
        'reserved_bit_valid=True safe_to_copy=False valid=True'
    )


def test_unregistered_code(caplog):
    caplog.set_level(logging.DEBUG)
    assert run_main(['RuSt', 'Rust']) == 0
    first, second = messages(caplog, logging.INFO)
    assert first.startswith('RuSt (unregistered): critical=True public=False')
    assert second.endswith('valid=False')


def test_bad_code_continues(caplog):
    caplog.set_level(logging.DEBUG)
    assert run_main(['RüSt', 'RuStx', 'tEXt']) == 1
    errors = messages(caplog, logging.ERROR)
    assert len(errors) == 2
    assert 'non-ascii' in errors[0]
    assert 'Expected 4, got 5' in errors[1]
    [info] = messages(caplog, logging.INFO)
    assert info.startswith('tEXt (textual data)')


def test_no_arguments(capsys):
    assert run_main([]) == 2
    assert 'usage: pngchunktype' in capsys.readouterr().err
