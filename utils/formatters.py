import math


def _numero_br(texto: str) -> str:
    # 1,234.56 -> 1.234,56
    return texto.replace(",", "X").replace(".", ",").replace("X", ".")


def formatar_razao(prob: float) -> str:
    """
    Probabilidade como "1 : N", com sufixo K/M/B para valores grandes.
    """
    if math.isnan(prob) or prob <= 0:
        return "—"
    if prob >= 1:
        return "1 : 1"

    razao = 1 / prob
    if math.isinf(razao):
        return "1 : ∞"
    if razao >= 1_000_000_000:
        return f"1 : {razao / 1_000_000_000:.1f}B"
    if razao >= 1_000_000:
        return f"1 : {razao / 1_000_000:.1f}M"
    if razao >= 1_000:
        return f"1 : {razao / 1_000:.1f}K"
    return f"1 : {razao:.1f}"


def formatar_percentual(prob: float) -> str:
    """
    Percentual com precisão variável: as odds de loteria vão de ~50% até
    frações de 1e-8, então uma casa decimal fixa não serve.
    """
    if math.isnan(prob) or prob <= 0:
        return "0%"
    if prob >= 1:
        return "100%"
    if prob < 0.000001:
        return f"{prob * 100:.2e}%"
    if prob < 0.01:
        return f"{prob * 100:.6f}%"
    return f"{prob * 100:.4f}%"


def formatar_moeda(valor: float | None) -> str:
    if valor is None:
        return "-"
    return "R$ " + _numero_br(f"{valor:,.2f}")


def formatar_moeda_curta(valor: float | None) -> str:
    if valor is None:
        return "-"
    if valor >= 1_000_000_000:
        return f"R$ {valor / 1_000_000_000:.1f}B"
    if valor >= 1_000_000:
        return f"R$ {valor / 1_000_000:.1f}M"
    if valor >= 1_000:
        return f"R$ {valor / 1_000:.0f}K"
    return f"R$ {valor:.0f}"


def formatar_data(data: str | None) -> str:
    # 2024-03-15 -> 15/03/2024
    if not data:
        return "-"
    partes = data.split("-")
    if len(partes) != 3:
        return data
    return f"{partes[2]}/{partes[1]}/{partes[0]}"


def formatar_cooldown(segundos: int) -> str:
    minutos, resto = divmod(max(0, int(segundos)), 60)
    return f"{minutos}:{resto:02d}"


def formatar_jogo(jogo: list[int], separador: str = " - ") -> str:
    return separador.join(f"{d:02d}" for d in jogo)
