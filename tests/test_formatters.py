import math

import pytest

from utils.formatters import (
    formatar_cooldown,
    formatar_data,
    formatar_jogo,
    formatar_moeda,
    formatar_moeda_curta,
    formatar_percentual,
    formatar_razao,
)


@pytest.mark.parametrize(
    "prob,esperado",
    [
        (0, "—"),
        (-0.5, "—"),
        (1, "1 : 1"),
        (3.0, "1 : 1"),
        (0.5, "1 : 2.0"),
        (1 / 2500, "1 : 2.5K"),
        (1 / 50063860, "1 : 50.1M"),
        (1e-10, "1 : 10.0B"),
    ],
)
def test_formatar_razao(prob, esperado):
    assert formatar_razao(prob) == esperado


@pytest.mark.parametrize(
    "prob,esperado",
    [
        (0, "0%"),
        (-1, "0%"),
        (1, "100%"),
        (0.5, "50.0000%"),
        (0.005, "0.500000%"),
        (1e-8, "1.00e-06%"),
    ],
)
def test_formatar_percentual(prob, esperado):
    assert formatar_percentual(prob) == esperado


@pytest.mark.parametrize("valor", [math.inf, -math.inf, math.nan, 5e-324, 1e-300, 0.999999, 1e300])
def test_formatadores_nunca_falham(valor):
    assert isinstance(formatar_razao(valor), str)
    assert isinstance(formatar_percentual(valor), str)


def test_valores_especiais():
    assert formatar_razao(math.nan) == "—"
    assert formatar_percentual(math.nan) == "0%"
    assert formatar_razao(math.inf) == "1 : 1"
    assert formatar_razao(5e-324) == "1 : ∞"


def test_formatar_moeda():
    assert formatar_moeda(1234.5) == "R$ 1.234,50"
    assert formatar_moeda(None) == "-"


def test_formatar_moeda_curta():
    assert formatar_moeda_curta(1_500_000_000) == "R$ 1.5B"
    assert formatar_moeda_curta(3_200_000) == "R$ 3.2M"
    assert formatar_moeda_curta(12_000) == "R$ 12K"
    assert formatar_moeda_curta(999) == "R$ 999"
    assert formatar_moeda_curta(None) == "-"


def test_formatar_data():
    assert formatar_data("2024-03-15") == "15/03/2024"
    assert formatar_data("15/03/2024") == "15/03/2024"
    assert formatar_data(None) == "-"
    assert formatar_data("") == "-"


@pytest.mark.parametrize("segundos,esperado", [(120, "2:00"), (65, "1:05"), (9, "0:09"), (0, "0:00"), (-5, "0:00")])
def test_formatar_cooldown(segundos, esperado):
    assert formatar_cooldown(segundos) == esperado


def test_formatar_jogo():
    assert formatar_jogo([1, 2, 30]) == "01 - 02 - 30"
    assert formatar_jogo([5, 60], ", ") == "05, 60"
