import pandas as pd

from utils.formatters import formatar_jogo


def contar_acertos(jogo: list[int], dezenas_sorteadas: list[int]) -> int:
    return len(set(jogo) & set(dezenas_sorteadas))


def simular_acertos(jogos: list[list[int]], dezenas_sorteadas: list[int]) -> pd.DataFrame:
    linhas = []
    for i, jogo in enumerate(jogos, start=1):
        linhas.append(
            {
                "jogo_id": i,
                "jogo": formatar_jogo(sorted(jogo)),
                "acertos": contar_acertos(jogo, dezenas_sorteadas),
            }
        )
    return pd.DataFrame(linhas, columns=["jogo_id", "jogo", "acertos"])


def resumo_acertos(df_sim: pd.DataFrame) -> pd.DataFrame:
    """
    Quantos jogos fizeram cada número de acertos.
    """
    dist = df_sim["acertos"].value_counts().sort_index().reset_index()
    dist.columns = ["acertos", "qtd_jogos"]
    return dist
