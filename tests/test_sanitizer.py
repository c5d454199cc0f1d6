import pytest

from utils.sanitizer import normalize_name, sanitize_name, sanitize_text, sanitize_instructions


@pytest.mark.parametrize('raw', [
    'Crème Fraîche',
    'creme fraiche',
    '  CREME   FRAICHE ',
    'CRÈME\tfraîche',
])
def test_normalize_name_folds_case_accents_and_spacing(raw):
    assert normalize_name(raw) == 'creme fraiche'


def test_normalize_name_handles_none_and_numbers():
    assert normalize_name(None) == ''
    assert normalize_name(42) == '42'


def test_normalize_name_folds_sharp_s():
    assert normalize_name('Straße') == normalize_name('STRASSE')


def test_sanitize_name():
    assert sanitize_name('  Olive\x00   Oil  ') == 'Olive Oil'
    assert sanitize_name(None) == ''
    assert sanitize_name('\x01\x02') == ''
    assert sanitize_name('Parmigiano Reggiano', max_length=11) == 'Parmigiano'


def test_sanitize_text_keeps_content_on_one_line():
    assert sanitize_text(' 1 cup,\x07 sifted ') == '1 cup, sifted'
    assert sanitize_text(None) == ''
    assert sanitize_text('<b>bold</b>') == '<b>bold</b>'
    assert len(sanitize_text('x' * 50, max_length=20)) == 20


def test_sanitize_instructions_keeps_line_breaks():
    text = 'Step 1.\n\tStir.\x00\nStep 2.'

    assert sanitize_instructions(text) == 'Step 1.\n\tStir.\nStep 2.'
    assert sanitize_instructions('') == ''
