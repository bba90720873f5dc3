import pytest


def build_rates_xml(rows, encoding="utf-8", declare=True):
    """Build a CBR-style daily rates document from (num_code, char_code, name, value) tuples."""
    body = "".join(
        f'<Valute ID="R{i:05d}"><NumCode>{num}</NumCode><CharCode>{char}</CharCode>'
        f"<Nominal>1</Nominal><Name>{name}</Name><Value>{value}</Value></Valute>"
        for i, (num, char, name, value) in enumerate(rows)
    )
    prolog = f'<?xml version="1.0" encoding="{encoding}"?>' if declare else ""
    text = f'{prolog}<ValCurs Date="02.03.2024" name="Foreign Currency Market">{body}</ValCurs>'
    return text.encode(encoding)


@pytest.fixture
def usd_eur_rows():
    return [
        ("840", "USD", "Доллар США", "75,4148"),
        ("978", "EUR", "Евро", "90,1936"),
    ]


@pytest.fixture
def rates_file(tmp_path, usd_eur_rows):
    path = tmp_path / "input" / "rates.xml"
    path.parent.mkdir()
    path.write_bytes(build_rates_xml(usd_eur_rows, encoding="windows-1251"))
    return path
