import pytest

HEADERS = [
    "Navio", "Bandeira", "Com./Cal.", "Nav.", "Cheg./Hora", "Operação", "Agência",
    "Aviso", "Mercadoria", "Peso", "Viagem", "DUV", "DUV Class", "P", "Terminal",
]

CONTAINER_ROW = [
    "MSC ANNA", "PANAMENHA", "366/15,5", "Longo Curso", "16/09/2025 00:54", "Embarque",
    "MSC Mediterranean", "EMBDESC", "CONTÊINER", "85000", "125E", "1234567", "A", "35", "BTP",
]

TANKER_ROW = [
    "STENA IMPERO", "Reino Unido", "18310.5", "Cabotagem", "07/09 8h", "123-45",
    "Wilson Sons", "DESC", "ÓLEO DIESEL", "40000", "22", "2025000999", "B", "ALA", "Alamoa",
]


def cells(values, tag="td"):
    return "".join(f"<{tag}>{value}</{tag}>" for value in values)


def lineup_page(rows, headers=HEADERS, extra=""):
    """A page shaped like the port authority's: a layout table, then the lineup."""
    head = f"<thead><tr>{cells(headers, 'th')}</tr></thead>" if headers else ""
    body = "".join(f"<tr>{cells(row)}</tr>" for row in rows)
    return (
        "<html><head><meta charset='utf-8'><title>Navios Esperados</title></head><body>"
        "<table class='menu'><tr><td>Início</td><td>Operações</td></tr></table>"
        f"{extra}"
        f"<table class='lineup'>{head}<tbody>{body}"
        "<tr><td colspan='15'>Total de navios previstos</td></tr>"
        "</tbody></table>"
        "</body></html>"
    )


@pytest.fixture
def headered_page():
    return lineup_page([CONTAINER_ROW, TANKER_ROW])


@pytest.fixture
def headerless_page():
    return lineup_page([CONTAINER_ROW, TANKER_ROW], headers=None)
