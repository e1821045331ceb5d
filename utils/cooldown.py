import logging
import threading
from typing import Any, Callable, Protocol

from config import SYNC_COOLDOWN_SECONDS

logger = logging.getLogger(__name__)

INTERVALO_TICK = 1.0


class Agendamento(Protocol):
    def cancel(self) -> None: ...


Agendador = Callable[[float, Callable[[], None]], Agendamento]


def agendador_thread(intervalo: float, callback: Callable[[], None]) -> Agendamento:
    timer = threading.Timer(intervalo, callback)
    timer.daemon = True
    timer.start()
    return timer


class CooldownSincronizacao:
    """
    Contagem regressiva do botão "Sincronizar com a Caixa".

    Estados: ocioso (restante == 0) e contando (restante > 0). Existe no
    máximo um tick agendado por vez; cada tick agenda o próximo. Iniciar
    uma nova contagem cancela o tick pendente e incrementa a geração, de
    modo que um callback antigo que já estava disparando é descartado.
    """

    def __init__(self, agendador: Agendador | None = None, intervalo: float = INTERVALO_TICK):
        self._agendador = agendador or agendador_thread
        self._intervalo = intervalo
        self._lock = threading.Lock()
        self._restante = 0
        self._geracao = 0
        self._pendente: Agendamento | None = None

    @property
    def restante(self) -> int:
        return self._restante

    @property
    def ativo(self) -> bool:
        return self._restante > 0

    @property
    def pode_sincronizar(self) -> bool:
        return not self.ativo

    def iniciar(self, segundos: int) -> None:
        segundos = max(0, int(segundos))
        with self._lock:
            self._cancelar_pendente()
            self._geracao += 1
            self._restante = segundos
            if segundos > 0:
                self._agendar(self._geracao)
        logger.debug(f"[COOLDOWN] iniciado com {segundos}s")

    def iniciar_do_status(self, status: dict[str, Any]) -> bool:
        """
        Arma a contagem a partir do /sync-status do backend, se ele
        informar que a sincronização ainda não é permitida.
        """
        restante = int(status.get("remainingSeconds") or 0)
        if status.get("allowed", True) or restante <= 0:
            return False
        self.iniciar(restante)
        return True

    def registrar_sincronizacao(self, segundos: int = SYNC_COOLDOWN_SECONDS) -> None:
        # sincronização feita pelo usuário sempre rearma o tempo cheio
        self.iniciar(segundos)

    def parar(self) -> None:
        with self._lock:
            self._cancelar_pendente()
            self._geracao += 1
            self._restante = 0

    def _cancelar_pendente(self) -> None:
        if self._pendente is not None:
            self._pendente.cancel()
            self._pendente = None

    def _agendar(self, geracao: int) -> None:
        self._pendente = self._agendador(self._intervalo, lambda: self._tick(geracao))

    def _tick(self, geracao: int) -> None:
        with self._lock:
            if geracao != self._geracao:
                return
            self._pendente = None
            self._restante = max(0, self._restante - 1)
            if self._restante > 0:
                self._agendar(geracao)
