import pytest

from analysis.loterias import TipoLoteria
from pricing.pricing_table import custo_total, preco_aposta


@pytest.mark.parametrize("dezenas,preco", [(6, 6.00), (7, 42.00), (8, 168.00), (15, 30030.00)])
def test_preco_mega_sena(dezenas, preco):
    assert preco_aposta(TipoLoteria.MEGA_SENA, dezenas) == pytest.approx(preco)


def test_preco_fixo():
    assert preco_aposta("lotomania", 50) == 3.00
    assert preco_aposta("timemania", 10) == 3.50


def test_super_sete_sem_preco_combinatorio():
    assert preco_aposta(TipoLoteria.SUPER_SETE, 10) is None
    assert custo_total(3, TipoLoteria.SUPER_SETE, 10) is None


def test_fora_da_faixa():
    with pytest.raises(ValueError):
        preco_aposta(TipoLoteria.MEGA_SENA, 5)
    with pytest.raises(ValueError):
        preco_aposta(TipoLoteria.LOTOFACIL, 21)


def test_custo_total():
    assert custo_total(10, TipoLoteria.LOTOFACIL, 16) == pytest.approx(10 * 16 * 3.50)
