from datetime import datetime

from utils.exportacao import formatar_linha_jogo, formatar_todos_jogos, gerar_csv, gerar_txt

RESULTADO = {
    "tipoLoteria": "timemania",
    "estrategia": "Números quentes",
    "jogos": [[1, 2, 3], [4, 5, 16]],
    "timeSugerido": "FLAMENGO/RJ",
    "timesSugeridos": None,
}


def test_linha_com_time_sugerido_so_no_primeiro_jogo():
    assert formatar_linha_jogo(RESULTADO, [1, 2, 3], 0) == "Jogo 1: 01, 02, 03 | Time: FLAMENGO/RJ"
    assert formatar_linha_jogo(RESULTADO, [4, 5, 16], 1) == "Jogo 2: 04, 05, 16"


def test_linha_com_sugestoes_por_jogo():
    resultado = {**RESULTADO, "timesSugeridos": ["A", "B"], "mesesSugeridos": ["Março", "Julho"]}
    assert formatar_linha_jogo(resultado, [4, 5, 16], 1) == "Jogo 2: 04, 05, 16 | Time: B | Mês: Julho"


def test_todos_os_jogos():
    texto = formatar_todos_jogos(RESULTADO)
    assert texto.splitlines() == ["Jogo 1: 01, 02, 03 | Time: FLAMENGO/RJ", "Jogo 2: 04, 05, 16"]


def test_csv():
    assert gerar_csv(RESULTADO) == 'jogo,numeros\n1,"01,02,03"\n2,"04,05,16"'


def test_txt():
    texto = gerar_txt(RESULTADO, agora=datetime(2024, 5, 1, 12, 30, 0))
    linhas = texto.splitlines()
    assert linhas[0] == "Jogos Gerados - timemania"
    assert linhas[1] == "Data: 01/05/2024 12:30:00"
    assert linhas[2] == "Estratégia: Números quentes"
    assert "Jogo 1: 01 - 02 - 03" in linhas
    assert "         Time do Coração: FLAMENGO/RJ" in linhas
