import json
import logging
import tempfile
import time
import uuid
from dataclasses import asdict, dataclass, field, fields
from datetime import datetime
from pathlib import Path
from typing import Any

from config import HISTORICO_PATH

logger = logging.getLogger(__name__)

MAX_HISTORICO = 50


@dataclass
class JogoSalvo:
    tipo: str
    jogos: list[list[int]]
    estrategia: str
    gerado_em: str
    id: str = ""
    time_sugerido: str | None = None
    mes_sugerido: str | None = None
    times_sugeridos: list[str] | None = None
    meses_sugeridos: list[str] | None = None

    @classmethod
    def from_dict(cls, dados: dict[str, Any]) -> "JogoSalvo":
        conhecidos = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in dados.items() if k in conhecidos})


def _chave_tipo(tipo) -> str:
    # aceita TipoLoteria ou o valor textual
    return str(getattr(tipo, "value", tipo))


def registro_de_resposta(tipo: str, resposta: dict[str, Any]) -> JogoSalvo:
    """
    Monta um registro de histórico a partir da resposta de geração do backend.
    """
    return JogoSalvo(
        tipo=_chave_tipo(tipo),
        jogos=[list(map(int, jogo)) for jogo in resposta.get("jogos", [])],
        estrategia=resposta.get("estrategia", ""),
        gerado_em=resposta.get("geradoEm") or datetime.now().isoformat(timespec="seconds"),
        time_sugerido=resposta.get("timeSugerido"),
        mes_sugerido=resposta.get("mesSugerido"),
        times_sugeridos=resposta.get("timesSugeridos"),
        meses_sugeridos=resposta.get("mesesSugeridos"),
    )


def _novo_id() -> str:
    return f"{int(time.time() * 1000)}-{uuid.uuid4()}"


class HistoricoJogos:
    """
    Histórico local dos jogos gerados, mais recente primeiro.

    Tudo fica num único arquivo JSON. Falhas de leitura/escrita são apenas
    logadas: o histórico nunca impede a geração de jogos.
    """

    def __init__(self, caminho: Path | str = HISTORICO_PATH, max_registros: int = MAX_HISTORICO):
        self.caminho = Path(caminho)
        self.max_registros = max_registros

    def _ler(self) -> list[JogoSalvo]:
        if not self.caminho.exists():
            return []
        try:
            dados = json.loads(self.caminho.read_text(encoding="utf-8"))
            return [JogoSalvo.from_dict(d) for d in dados]
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"[HISTORICO] erro lendo {self.caminho}: {e}")
            return []

    def _gravar(self, registros: list[JogoSalvo]) -> bool:
        """Escreve o JSON de forma atômica para não corromper o arquivo em caso de erro."""
        tmp_path = None
        try:
            self.caminho.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                delete=False,
                dir=str(self.caminho.parent),
                suffix=".tmp",
                encoding="utf-8",
            ) as tmp:
                tmp_path = tmp.name
                json.dump([asdict(r) for r in registros], tmp, ensure_ascii=False)

            Path(tmp_path).replace(self.caminho)
            return True
        except (OSError, TypeError, ValueError) as e:
            if tmp_path is not None:
                Path(tmp_path).unlink(missing_ok=True)
            logger.warning(f"[HISTORICO] não foi possível salvar em {self.caminho}: {e}")
            return False

    def salvar(self, registro: JogoSalvo) -> JogoSalvo:
        registro.id = _novo_id()
        historico = self._ler()
        historico.insert(0, registro)
        del historico[self.max_registros:]
        self._gravar(historico)
        return registro

    def listar(self, tipo: str | None = None) -> list[JogoSalvo]:
        historico = self._ler()
        if tipo is None:
            return historico
        return [r for r in historico if r.tipo == _chave_tipo(tipo)]

    def remover(self, id_registro: str) -> list[JogoSalvo]:
        historico = [r for r in self._ler() if r.id != id_registro]
        self._gravar(historico)
        return historico

    def limpar(self, tipo: str | None = None) -> list[JogoSalvo]:
        if tipo is None:
            historico: list[JogoSalvo] = []
        else:
            historico = [r for r in self._ler() if r.tipo != _chave_tipo(tipo)]
        self._gravar(historico)
        return historico
