import numpy as np
import pandas as pd

from utils.formatters import formatar_jogo

ORDENACOES_RANKING = ("score", "frequencia", "atraso")


def ranking_dataframe(ranking: list[dict], ordenar_por: str = "score") -> pd.DataFrame:
    """
    Achata o ranking de números do backend e ordena pelo critério escolhido
    (maior primeiro; empate pelo número).
    """
    if ordenar_por not in ORDENACOES_RANKING:
        raise ValueError(f"Ordenação desconhecida: {ordenar_por}")

    linhas = []
    for item in ranking:
        est = item.get("estatisticas") or {}
        tend = item.get("tendencia") or {}
        linhas.append(
            {
                "numero": item.get("numero"),
                "frequencia": est.get("frequencia", 0),
                "percentual": est.get("percentualAparicoes", 0.0),
                "atraso": est.get("atrasoAtual", 0),
                "maior_atraso": est.get("maiorAtraso", 0),
                "score": tend.get("scoreTendencia", 0.0),
                "status": tend.get("status", ""),
                "recomendacao": tend.get("recomendacao", ""),
            }
        )
    df = pd.DataFrame(
        linhas,
        columns=["numero", "frequencia", "percentual", "atraso", "maior_atraso", "score", "status", "recomendacao"],
    )
    return df.sort_values([ordenar_por, "numero"], ascending=[False, True], kind="stable").reset_index(drop=True)


def top_numeros(df_ranking: pd.DataFrame, n: int = 10) -> list[int]:
    # destaque em ordem crescente, como num volante
    return sorted(int(x) for x in df_ranking["numero"].head(n))


def frequencia_posicional(itens: list[dict]) -> pd.DataFrame:
    """Primeira/última bola: quantas vezes cada número saiu naquela posição."""
    df = pd.DataFrame(itens, columns=["numero", "frequencia", "percentual"])
    return df.sort_values(["frequencia", "numero"], ascending=[False, True], kind="stable").reset_index(drop=True)


def dupla_sena_frequencias(comparacao: dict) -> pd.DataFrame:
    # chaves do JSON chegam como texto
    primeiro = {int(k): v for k, v in (comparacao.get("frequenciaPrimeiroSorteio") or {}).items()}
    segundo = {int(k): v for k, v in (comparacao.get("frequenciaSegundoSorteio") or {}).items()}
    numeros = sorted(set(primeiro) | set(segundo))
    df = pd.DataFrame(
        {
            "numero": numeros,
            "primeiro_sorteio": [primeiro.get(n, 0) for n in numeros],
            "segundo_sorteio": [segundo.get(n, 0) for n in numeros],
        },
        columns=["numero", "primeiro_sorteio", "segundo_sorteio"],
    )
    df["diferenca"] = df["primeiro_sorteio"] - df["segundo_sorteio"]
    return df


def distribuicao_coincidencias(coincidencias: dict) -> pd.DataFrame:
    dist = coincidencias.get("distribuicaoCoincidencias") or {}
    linhas = sorted((int(k), v) for k, v in dist.items())
    return pd.DataFrame(linhas, columns=["coincidencias", "concursos"])


def ganhadores_por_uf(dados: dict) -> pd.DataFrame:
    """
    Ganhadores por estado, do maior para o menor, com a participação de
    cada UF no total.
    """
    linhas = [
        {
            "uf": e.get("uf", ""),
            "ganhadores": e.get("totalGanhadores", 0),
            "concursos": e.get("totalConcursos", 0),
        }
        for e in dados.get("porEstado") or []
    ]
    df = pd.DataFrame(linhas, columns=["uf", "ganhadores", "concursos"])
    total = dados.get("totalGanhadores") or df["ganhadores"].sum()
    if total:
        df["percentual"] = np.round(df["ganhadores"] / total * 100, 2)
    else:
        df["percentual"] = 0.0
    return df.sort_values(["ganhadores", "uf"], ascending=[False, True], kind="stable").reset_index(drop=True)


def frequencia_itens(itens: list[dict]) -> pd.DataFrame:
    """Times do coração ou meses da sorte."""
    linhas = [
        {
            "nome": i.get("nome", ""),
            "frequencia": i.get("frequencia", 0),
            "percentual": i.get("percentual", 0.0),
            "atraso": i.get("atrasoAtual", 0),
            "ultima_aparicao": i.get("ultimaAparicao"),
        }
        for i in itens
    ]
    df = pd.DataFrame(linhas, columns=["nome", "frequencia", "percentual", "atraso", "ultima_aparicao"])
    return df.sort_values(["frequencia", "nome"], ascending=[False, True], kind="stable").reset_index(drop=True)


def historico_mensal_dataframe(meses: list[dict]) -> pd.DataFrame:
    linhas = [
        {
            "ano": m.get("ano"),
            "mes": m.get("mes"),
            "mes_ano": f"{m.get('mes', 0):02d}/{m.get('ano', 0)}",
            "mais_frequentes": formatar_jogo(m.get("maisFrequentes") or []),
            "menos_frequentes": formatar_jogo(m.get("menosFrequentes") or []),
        }
        for m in meses
    ]
    df = pd.DataFrame(linhas, columns=["ano", "mes", "mes_ano", "mais_frequentes", "menos_frequentes"])
    return df.sort_values(["ano", "mes"], kind="stable").reset_index(drop=True)


def proximos_especiais(dados: dict) -> pd.DataFrame:
    linhas = [
        {
            "loteria": p.get("nomeLoteria", p.get("tipoLoteria", "")),
            "especial": p.get("nomeEspecial") or "",
            "concurso": p.get("numeroConcursoFinalEspecial"),
            "faltam": p.get("concursosFaltando", 0),
            "acumulado": p.get("valorAcumulado"),
            "data_estimada": p.get("dataEstimada"),
        }
        for p in dados.get("proximosConcursosEspeciais") or []
    ]
    df = pd.DataFrame(
        linhas, columns=["loteria", "especial", "concurso", "faltam", "acumulado", "data_estimada"]
    )
    return df.sort_values("faltam", kind="stable").reset_index(drop=True)
