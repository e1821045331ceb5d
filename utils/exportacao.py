from datetime import datetime
from typing import Any

import pandas as pd

from utils.formatters import formatar_jogo


def _sugestao(lista: list[str] | None, unico: str | None, indice: int) -> str | None:
    # listas por jogo têm prioridade; o valor único vale só para o primeiro jogo
    if lista and indice < len(lista) and lista[indice]:
        return lista[indice]
    return unico if indice == 0 else None


def formatar_linha_jogo(resultado: dict[str, Any], jogo: list[int], indice: int, separador: str = ", ") -> str:
    linha = f"Jogo {indice + 1}: {formatar_jogo(jogo, separador)}"
    time_ = _sugestao(resultado.get("timesSugeridos"), resultado.get("timeSugerido"), indice)
    mes = _sugestao(resultado.get("mesesSugeridos"), resultado.get("mesSugerido"), indice)
    if time_:
        linha += f" | Time: {time_}"
    if mes:
        linha += f" | Mês: {mes}"
    return linha


def formatar_todos_jogos(resultado: dict[str, Any]) -> str:
    return "\n".join(formatar_linha_jogo(resultado, jogo, i) for i, jogo in enumerate(resultado.get("jogos", [])))


def gerar_csv(resultado: dict[str, Any]) -> str:
    df = pd.DataFrame(
        [
            {"jogo": i, "numeros": formatar_jogo(jogo, ",")}
            for i, jogo in enumerate(resultado.get("jogos", []), start=1)
        ],
        columns=["jogo", "numeros"],
    )
    return df.to_csv(index=False, lineterminator="\n").rstrip("\n")


def gerar_txt(resultado: dict[str, Any], agora: datetime | None = None) -> str:
    agora = agora or datetime.now()
    linhas = [
        f"Jogos Gerados - {resultado.get('tipoLoteria', '')}",
        f"Data: {agora:%d/%m/%Y %H:%M:%S}",
        f"Estratégia: {resultado.get('estrategia', '')}",
        "=" * 40,
        "",
    ]
    for i, jogo in enumerate(resultado.get("jogos", [])):
        linhas.append(f"Jogo {i + 1}: {formatar_jogo(jogo)}")
        time_ = _sugestao(resultado.get("timesSugeridos"), resultado.get("timeSugerido"), i)
        mes = _sugestao(resultado.get("mesesSugeridos"), resultado.get("mesSugerido"), i)
        if time_:
            linhas.append(f"         Time do Coração: {time_}")
        if mes:
            linhas.append(f"         Mês da Sorte: {mes}")
    return "\n".join(linhas) + "\n"
