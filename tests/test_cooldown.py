from config import SYNC_COOLDOWN_SECONDS
from utils.cooldown import CooldownSincronizacao


class TarefaManual:
    def __init__(self, callback):
        self.callback = callback
        self.cancelada = False

    def cancel(self):
        self.cancelada = True


class AgendadorManual:
    """Relógio de teste: cada `avancar()` dispara os ticks pendentes."""

    def __init__(self):
        self.tarefas = []

    def __call__(self, intervalo, callback):
        tarefa = TarefaManual(callback)
        self.tarefas.append(tarefa)
        return tarefa

    def ativas(self):
        return [t for t in self.tarefas if not t.cancelada]

    def avancar(self, segundos=1):
        for _ in range(segundos):
            prontas = self.ativas()
            self.tarefas = []
            for t in prontas:
                t.callback()


def test_contagem_decrementa_um_por_segundo():
    relogio = AgendadorManual()
    cd = CooldownSincronizacao(agendador=relogio)
    cd.iniciar(120)
    assert cd.ativo and not cd.pode_sincronizar

    relogio.avancar()
    assert cd.restante == 119
    relogio.avancar(9)
    assert cd.restante == 110


def test_chega_a_zero_e_para():
    relogio = AgendadorManual()
    cd = CooldownSincronizacao(agendador=relogio)
    cd.iniciar(2)
    relogio.avancar(2)
    assert cd.restante == 0
    assert cd.pode_sincronizar
    assert relogio.ativas() == []

    relogio.avancar(3)
    assert cd.restante == 0


def test_reiniciar_nao_sobrepoe_contagens():
    relogio = AgendadorManual()
    cd = CooldownSincronizacao(agendador=relogio)
    cd.iniciar(5)
    relogio.avancar()
    cd.iniciar(10)

    assert len(relogio.ativas()) == 1
    relogio.avancar()
    assert cd.restante == 9


def test_callback_antigo_e_descartado():
    relogio = AgendadorManual()
    cd = CooldownSincronizacao(agendador=relogio)
    cd.iniciar(5)
    antiga = relogio.tarefas[0]
    cd.iniciar(10)

    # tick antigo que já estava disparando quando foi cancelado
    antiga.callback()
    assert cd.restante == 10


def test_iniciar_do_status():
    relogio = AgendadorManual()
    cd = CooldownSincronizacao(agendador=relogio)

    assert cd.iniciar_do_status({"allowed": True, "remainingSeconds": 0}) is False
    assert cd.iniciar_do_status({"allowed": False, "remainingSeconds": 0}) is False
    assert not cd.ativo

    assert cd.iniciar_do_status({"allowed": False, "remainingSeconds": 45, "cooldownSeconds": 120}) is True
    assert cd.restante == 45


def test_sincronizacao_rearma_tempo_cheio():
    relogio = AgendadorManual()
    cd = CooldownSincronizacao(agendador=relogio)
    cd.iniciar_do_status({"allowed": False, "remainingSeconds": 3})
    cd.registrar_sincronizacao()
    assert cd.restante == SYNC_COOLDOWN_SECONDS


def test_iniciar_com_zero_fica_ocioso():
    relogio = AgendadorManual()
    cd = CooldownSincronizacao(agendador=relogio)
    cd.iniciar(0)
    assert not cd.ativo
    assert relogio.tarefas == []


def test_parar():
    relogio = AgendadorManual()
    cd = CooldownSincronizacao(agendador=relogio)
    cd.iniciar(30)
    cd.parar()
    assert cd.restante == 0
    assert relogio.ativas() == []
