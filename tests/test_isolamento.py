from backend.client import RequisicaoCancelada
from utils.isolamento import executar_isolado


def test_sucesso_devolve_valor():
    resultado = executar_isolado("soma", lambda a, b: a + b, 2, 3)
    assert resultado.ok
    assert resultado.valor == 5


def test_erro_fica_contido_e_chama_fallback():
    falhas = []

    def quebra():
        raise ValueError("dados inválidos")

    resultado = executar_isolado("financeiro", quebra, ao_falhar=falhas.append)
    assert not resultado.ok
    assert isinstance(resultado.erro, ValueError)
    assert not resultado.cancelado
    assert falhas == [resultado]


def test_cancelamento_nao_e_erro():
    def cancela():
        raise RequisicaoCancelada("/api/x", "timeout")

    resultado = executar_isolado("dashboard", cancela)
    assert not resultado.ok
    assert resultado.cancelado


def test_paineis_independentes():
    def quebra():
        raise RuntimeError("x")

    resultados = [
        executar_isolado("a", quebra),
        executar_isolado("b", lambda: "ok"),
    ]
    assert [r.ok for r in resultados] == [False, True]
