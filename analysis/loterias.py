from dataclasses import dataclass
from enum import Enum


class TipoLoteria(str, Enum):
    MEGA_SENA = "mega_sena"
    LOTOFACIL = "lotofacil"
    QUINA = "quina"
    LOTOMANIA = "lotomania"
    TIMEMANIA = "timemania"
    DUPLA_SENA = "dupla_sena"
    DIA_DE_SORTE = "dia_de_sorte"
    SUPER_SETE = "super_sete"
    MAIS_MILIONARIA = "mais_milionaria"


@dataclass(frozen=True)
class LoteriaConfig:
    tipo: TipoLoteria
    label: str
    cor: str
    min: int
    max: int
    numero_inicial: int
    numero_final: int

    @property
    def tamanho_universo(self) -> int:
        return self.numero_final - self.numero_inicial + 1


LOTERIAS: list[LoteriaConfig] = [
    LoteriaConfig(TipoLoteria.MEGA_SENA, "Mega-Sena", "#209869", 6, 20, 1, 60),
    LoteriaConfig(TipoLoteria.LOTOFACIL, "Lotofácil", "#930089", 15, 20, 1, 25),
    LoteriaConfig(TipoLoteria.QUINA, "Quina", "#260085", 5, 15, 1, 80),
    LoteriaConfig(TipoLoteria.LOTOMANIA, "Lotomania", "#F78100", 50, 50, 0, 99),
    LoteriaConfig(TipoLoteria.TIMEMANIA, "Timemania", "#00FF48", 10, 10, 1, 80),
    LoteriaConfig(TipoLoteria.DUPLA_SENA, "Dupla Sena", "#A61324", 6, 15, 1, 50),
    LoteriaConfig(TipoLoteria.DIA_DE_SORTE, "Dia de Sorte", "#CB8529", 7, 15, 1, 31),
    LoteriaConfig(TipoLoteria.SUPER_SETE, "Super Sete", "#A8CF45", 7, 21, 0, 9),
    LoteriaConfig(TipoLoteria.MAIS_MILIONARIA, "+Milionária", "#00346C", 6, 12, 1, 50),
]

LOTERIA_CONFIG: dict[TipoLoteria, LoteriaConfig] = {lot.tipo: lot for lot in LOTERIAS}


def obter_config(tipo: TipoLoteria | str) -> LoteriaConfig:
    """
    Aceita o enum ou o valor textual ('mega_sena', 'lotofacil', ...).
    """
    try:
        return LOTERIA_CONFIG[TipoLoteria(tipo)]
    except ValueError:
        raise ValueError(f"Loteria desconhecida: {tipo!r}") from None


def limitar_quantidade(tipo: TipoLoteria | str, qtd_dezenas: int) -> int:
    # a calculadora confia nesse limite, não valida por conta própria
    config = obter_config(tipo)
    return max(config.min, min(config.max, int(qtd_dezenas)))
