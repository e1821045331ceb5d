import atexit
import logging
import re
from datetime import datetime

import pandas as pd
import streamlit as st

from analysis.conferencia import resumo_acertos, simular_acertos
from analysis.loterias import LOTERIAS, TipoLoteria, limitar_quantidade, obter_config
from analysis.probability import odds_dataframe, resumo_probabilidades
from analysis.tabelas import (
    ORDENACOES_RANKING,
    distribuicao_coincidencias,
    dupla_sena_frequencias,
    frequencia_itens,
    frequencia_posicional,
    ganhadores_por_uf,
    historico_mensal_dataframe,
    proximos_especiais,
    ranking_dataframe,
    top_numeros,
)
from backend.client import ApiClient, CargasPorVisao, GerarJogoRequest
from backend.geracao import MODO_ESTRATEGICO, MODO_PERSONALIZADO, gerar_para_loterias
from backend.metrics import MetricsCollector
from config import (
    BACKEND_URL,
    HISTORICO_PATH,
    METRICS_ENABLED,
    configurar_logging,
)
from pricing.pricing_table import preco_aposta
from utils.cooldown import CooldownSincronizacao
from utils.exportacao import formatar_todos_jogos, gerar_csv, gerar_txt
from utils.formatters import (
    formatar_cooldown,
    formatar_data,
    formatar_jogo,
    formatar_moeda,
    formatar_moeda_curta,
    formatar_percentual,
    formatar_razao,
)
from utils.isolamento import ResultadoPainel, executar_isolado
from utils.storage import HistoricoJogos, registro_de_resposta

configurar_logging()
logger = logging.getLogger("app_streamlit")

# ==========================
# CONFIG GERAL
# ==========================

st.set_page_config(
    page_title="Loterias Dashboard",
    page_icon="🎰",
    layout="wide",
    initial_sidebar_state="expanded",
)


def inject_global_css() -> None:
    st.markdown(
        """
        <style>
        .main-title {
            font-size: 2.0rem;
            font-weight: 700;
            margin-bottom: 0.25rem;
        }
        .main-subtitle {
            font-size: 0.9rem;
            color: #6b7280;
            margin-bottom: 0.75rem;
        }
        div[data-testid="metric-container"] {
            background-color: #ffffff;
            padding: 0.75rem 0.9rem;
            border-radius: 0.75rem;
            border: 1px solid #e5e7eb;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


inject_global_css()

# ==========================
# RECURSOS (um por processo)
# ==========================


@st.cache_resource
def obter_metrics() -> MetricsCollector:
    metrics = MetricsCollector(enabled=METRICS_ENABLED)
    metrics.init()
    atexit.register(metrics.shutdown)
    return metrics


@st.cache_resource
def obter_cliente() -> ApiClient:
    return ApiClient(BACKEND_URL, metrics=obter_metrics())


@st.cache_resource
def obter_historico() -> HistoricoJogos:
    return HistoricoJogos(HISTORICO_PATH)


cliente = obter_cliente()
historico = obter_historico()

if "cooldown" not in st.session_state:
    cooldown = CooldownSincronizacao()
    st.session_state["cooldown"] = cooldown
    try:
        cooldown.iniciar_do_status(cliente.get_sync_status())
    except Exception as e:
        logger.error(f"Falha ao consultar status de sincronização: {e}")
cooldown: CooldownSincronizacao = st.session_state["cooldown"]

if "cargas" not in st.session_state:
    st.session_state["cargas"] = CargasPorVisao()
cargas: CargasPorVisao = st.session_state["cargas"]


# ==========================
# UTILITÁRIOS
# ==========================


def parse_lista(texto: str) -> list[int]:
    """
    Aceita: "1 2 3", "1,2,3", "1; 2;3" e remove duplicados preservando ordem.
    """
    if not texto:
        return []
    tokens = re.split(r"[,\s;]+", texto.strip())
    out: list[int] = []
    seen: set[int] = set()
    for t in tokens:
        if t.isdigit():
            v = int(t)
            if v not in seen:
                out.append(v)
                seen.add(v)
    return out


def validar_dezenas(lista: list[int], inicio: int, fim: int, nome: str) -> None:
    if any((d < inicio or d > fim) for d in lista):
        raise ValueError(f"{nome}: há dezenas fora do intervalo {inicio}–{fim}.")


def _mostrar_falha(resultado: ResultadoPainel) -> None:
    if resultado.cancelado:
        st.info(f"Carregamento de {resultado.nome} cancelado.")
        return
    st.error(f"Erro ao carregar {resultado.nome}: {resultado.erro}")
    if st.button("Tentar novamente", key=f"retry_{resultado.nome}"):
        st.cache_data.clear()
        st.rerun()


def painel(nome: str, funcao, *args, **kwargs) -> ResultadoPainel:
    return executar_isolado(nome, funcao, *args, ao_falhar=_mostrar_falha, **kwargs)


@st.cache_data(ttl=600, show_spinner=False)
def carregar_estrategias() -> list[dict]:
    return cliente.get_estrategias()


# ==========================
# SIDEBAR
# ==========================


@st.fragment(run_every=1)
def botao_sincronizar() -> None:
    restante = cooldown.restante
    rotulo = f"Aguarde {formatar_cooldown(restante)}" if restante > 0 else "Sincronizar da Caixa"
    if st.button(rotulo, disabled=not cooldown.pode_sincronizar, use_container_width=True):
        try:
            resultado = cliente.sync_todas_loterias()
            cooldown.registrar_sincronizacao()
            st.success(f"{resultado.get('totalSincronizados', 0)} concursos sincronizados.")
            if resultado.get("totalSincronizados", 0) > 0:
                st.cache_data.clear()
                st.rerun()
        except Exception as e:
            logger.error(f"Falha ao sincronizar loterias: {e}")
            st.error("Erro ao sincronizar dados da Caixa.")

    if st.button(f"Sincronizar só {config_loteria.label}", disabled=not cooldown.pode_sincronizar, use_container_width=True):
        try:
            resultado = cliente.sync_loteria(tipo)
        except Exception as e:
            logger.error(f"Falha ao sincronizar {tipo.value}: {e}")
            st.error(f"Erro ao sincronizar {config_loteria.label}.")
            return
        if resultado.get("rateLimited"):
            cooldown.iniciar(int(resultado.get("remainingSeconds") or 0))
            st.warning(resultado.get("mensagem") or "Aguarde para sincronizar novamente.")
            return
        cooldown.registrar_sincronizacao()
        st.success(resultado.get("mensagem") or f"{resultado.get('sincronizados', 0)} concursos sincronizados.")
        if resultado.get("sincronizados", 0) > 0:
            st.cache_data.clear()
            st.rerun()


with st.sidebar:
    st.title("Loterias Dashboard")

    config_loteria = st.selectbox(
        "Loteria",
        LOTERIAS,
        format_func=lambda lot: lot.label,
        help="Escolha qual loteria deseja analisar.",
    )
    tipo: TipoLoteria = config_loteria.tipo

    pagina = st.radio(
        "Navegação",
        [
            "Dashboard",
            "Gerar jogos",
            "Gerar para várias loterias",
            "Conferir aposta",
            "Probabilidades",
            "Histórico",
            "Ranking de números",
            "Ordem do sorteio",
            "Ganhadores por estado",
            "Time do Coração / Mês da Sorte",
            "Financeiro",
            "Tendências",
            "Concursos especiais",
            "Dupla Sena",
        ],
    )

    st.markdown("### Atualização (Caixa)")
    botao_sincronizar()

    if st.button("Limpar cache"):
        st.cache_data.clear()
        st.rerun()


# trocar de página ou de loteria cancela as cargas ainda em voo da visão anterior
if cargas.trocar_visao((pagina, tipo.value)):
    logger.debug(f"Visão atual: {pagina} / {tipo.value}")


# ==========================
# PÁGINAS
# ==========================


def pagina_dashboard() -> None:
    dados = cargas.carregar("dashboard", cliente.get_dashboard, tipo)

    st.markdown(f"<div class='main-title'>{dados.get('nomeLoteria', config_loteria.label)}</div>", unsafe_allow_html=True)
    resumo = dados.get("resumo") or {}
    col1, col2, col3 = st.columns(3)
    col1.metric("Total de concursos", resumo.get("totalConcursos", 0))
    col2.metric("Maior prêmio", formatar_moeda_curta(resumo.get("maiorPremio")))
    col3.metric("Dias sem sorteio", resumo.get("diasSemSorteio", 0))
    st.caption(f"De {formatar_data(resumo.get('primeiroSorteio'))} até {formatar_data(resumo.get('ultimoSorteio'))}")

    ultimo = dados.get("ultimoConcurso")
    if ultimo:
        st.markdown(f"### Concurso {ultimo['numero']} ({formatar_data(ultimo.get('data'))})")
        st.code(formatar_jogo(ultimo.get("dezenas", [])))
        if ultimo.get("acumulou"):
            st.info(f"Acumulou! {formatar_moeda(ultimo.get('valorAcumulado'))}")

    colq, colf, cola = st.columns(3)
    with colq:
        st.markdown("Quentes")
        st.write(formatar_jogo(dados.get("numerosQuentes", [])))
    with colf:
        st.markdown("Frios")
        st.write(formatar_jogo(dados.get("numerosFrios", [])))
    with cola:
        st.markdown("Atrasados")
        st.write(formatar_jogo(dados.get("numerosAtrasados", [])))

    proximo = dados.get("proximoConcurso")
    if proximo:
        st.metric(
            f"Próximo concurso {proximo['numero']} ({formatar_data(proximo.get('dataEstimada'))})",
            formatar_moeda(proximo.get("premioEstimado")),
        )

    painel("acumulado", _painel_acumulado)


def _painel_acumulado() -> None:
    acum = cargas.carregar("acumulado", cliente.get_acumulado, tipo)
    if not acum.get("acumulado"):
        return
    st.warning(
        f"Acumulada há {acum.get('concursosAcumulados', 0)} concurso(s): "
        f"{formatar_moeda(acum.get('valorAcumulado'))} acumulados, "
        f"estimativa de {formatar_moeda(acum.get('valorEstimadoProximo'))} "
        f"em {formatar_data(acum.get('dataEstimadaProximo'))}."
    )


def _mostrar_jogos(resposta: dict) -> None:
    st.code(formatar_todos_jogos(resposta))
    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "Baixar CSV",
            data=gerar_csv(resposta).encode("utf-8"),
            file_name=f"jogos_{tipo.value}_{datetime.now().date()}.csv",
            mime="text/csv",
        )
    with col2:
        st.download_button(
            "Baixar TXT",
            data=gerar_txt(resposta).encode("utf-8"),
            file_name=f"jogos_{tipo.value}_{datetime.now().date()}.txt",
            mime="text/plain",
        )


def pagina_gerar() -> None:
    st.markdown(f"<div class='main-title'>Gerador de jogos da {config_loteria.label}</div>", unsafe_allow_html=True)

    modo = st.radio("Modo de geração", ["Estratégico", "Personalizado"], horizontal=True)
    qtd_jogos = st.number_input("Quantidade de jogos", min_value=1, max_value=50, value=5, step=1)

    if modo == "Estratégico":
        estrategias = carregar_estrategias()
        estrategia = st.selectbox(
            "Estratégia",
            estrategias,
            format_func=lambda e: e.get("nome", e.get("codigo", "")),
        )
        if estrategia:
            st.caption(estrategia.get("descricao", ""))
        gerar = st.button("Gerar jogos", type="primary")
        if gerar and estrategia:
            resposta = cliente.gerar_jogos_estrategico(tipo, estrategia["codigo"], int(qtd_jogos))
            st.session_state["ultima_geracao"] = resposta
            historico.salvar(registro_de_resposta(tipo, resposta))
    else:
        tam = st.slider("Dezenas por jogo", config_loteria.min, config_loteria.max, config_loteria.min)
        col1, col2 = st.columns(2)
        with col1:
            quentes = st.checkbox("Usar números quentes")
            frios = st.checkbox("Usar números frios")
            atrasados = st.checkbox("Usar números atrasados")
        with col2:
            balancear = st.checkbox("Balancear pares/ímpares")
            sem_seq = st.checkbox("Evitar sequenciais")
        fixas_txt = st.text_input("Dezenas obrigatórias", placeholder="Ex: 10, 11, 12")
        proibidas_txt = st.text_input("Dezenas excluídas", placeholder="Ex: 1, 2, 3")

        if st.button("Gerar jogos", type="primary"):
            fixas = parse_lista(fixas_txt)
            proibidas = parse_lista(proibidas_txt)
            try:
                validar_dezenas(fixas, config_loteria.numero_inicial, config_loteria.numero_final, "Dezenas obrigatórias")
                validar_dezenas(proibidas, config_loteria.numero_inicial, config_loteria.numero_final, "Dezenas excluídas")
            except ValueError as e:
                st.error(str(e))
                return
            req = GerarJogoRequest(
                quantidade_numeros=tam,
                quantidade_jogos=int(qtd_jogos),
                usar_numeros_quentes=quentes or None,
                usar_numeros_frios=frios or None,
                usar_numeros_atrasados=atrasados or None,
                balancear_pares_impares=balancear or None,
                evitar_sequenciais=sem_seq or None,
                numeros_obrigatorios=fixas,
                numeros_excluidos=proibidas,
            )
            resposta = cliente.gerar_jogos_personalizado(tipo, req)
            st.session_state["ultima_geracao"] = resposta
            historico.salvar(registro_de_resposta(tipo, resposta))

    resposta = st.session_state.get("ultima_geracao")
    if resposta:
        st.divider()
        st.markdown(f"### {resposta.get('estrategia', '')}")
        _mostrar_jogos(resposta)


def pagina_gerar_varias() -> None:
    st.title("Gerar para várias loterias")
    selecionadas = st.multiselect(
        "Loterias",
        LOTERIAS,
        default=[config_loteria],
        format_func=lambda lot: lot.label,
    )
    modo = st.radio("Modo", [MODO_ESTRATEGICO, MODO_PERSONALIZADO], horizontal=True)
    qtd = st.number_input("Jogos por loteria", min_value=1, max_value=20, value=3, step=1)
    estrategia = ""
    if modo == MODO_ESTRATEGICO:
        estrategias = carregar_estrategias()
        escolhida = st.selectbox("Estratégia", estrategias, format_func=lambda e: e.get("nome", ""))
        estrategia = escolhida["codigo"] if escolhida else ""

    if st.button("Gerar", type="primary") and selecionadas:
        with st.spinner("Gerando..."):
            resultado = gerar_para_loterias(
                cliente,
                [lot.tipo for lot in selecionadas],
                modo=modo,
                estrategia=estrategia,
                quantidade=int(qtd),
                historico=historico,
            )
        if resultado.falhas:
            st.warning(f"{resultado.falhas} loteria(s) falharam e foram ignoradas.")
        for tipo_gerado, resposta in resultado.sucessos:
            st.markdown(f"### {obter_config(tipo_gerado).label} - {resposta.get('estrategia', '')}")
            st.code(formatar_todos_jogos(resposta))


def pagina_conferir() -> None:
    st.title(f"Conferir aposta na {config_loteria.label}")
    texto = st.text_input(
        f"Informe de {config_loteria.min} a {config_loteria.max} dezenas",
        placeholder="Ex: 05, 12, 23, 34, 45, 60",
    )
    numeros = parse_lista(texto)
    if not st.button("Conferir", type="primary"):
        return
    try:
        validar_dezenas(numeros, config_loteria.numero_inicial, config_loteria.numero_final, "Aposta")
        if not (config_loteria.min <= len(numeros) <= config_loteria.max):
            raise ValueError(f"Informe entre {config_loteria.min} e {config_loteria.max} dezenas.")
    except ValueError as e:
        st.error(str(e))
        return

    dados = cliente.conferir_aposta(tipo, numeros)
    resumo = dados.get("resumo") or {}
    col1, col2, col3 = st.columns(3)
    col1.metric("Concursos analisados", resumo.get("totalConcursosAnalisados", 0))
    col2.metric("Vezes premiado", resumo.get("vezesPremiado", 0))
    col3.metric("Prêmios (histórico)", formatar_moeda(resumo.get("totalPremioHistorico")))

    premiados = dados.get("concursosPremiados") or []
    if premiados:
        df = pd.DataFrame(premiados)
        df["dezenasSorteadas"] = df["dezenasSorteadas"].map(formatar_jogo)
        df["acertos"] = df["acertos"].map(formatar_jogo)
        st.dataframe(df, use_container_width=True)
    else:
        st.info("Essa aposta nunca teria sido premiada.")


def pagina_probabilidades() -> None:
    st.title(f"Calculadora de probabilidades - {config_loteria.label}")
    if config_loteria.min == config_loteria.max:
        qtd = config_loteria.min
        st.write(f"Aposta fixa de {qtd} dezenas.")
    else:
        qtd = st.slider("Dezenas apostadas", config_loteria.min, config_loteria.max, config_loteria.min)
    qtd = limitar_quantidade(tipo, qtd)

    resumo = resumo_probabilidades(tipo, qtd)
    col1, col2, col3 = st.columns(3)
    premio_max = resumo.faixas[0] if resumo.faixas else None
    col1.metric(
        f"Chance de {resumo.rotulo_premio_maximo}",
        premio_max.razao if premio_max else "—",
    )
    col2.metric(
        "Chance de qualquer prêmio",
        formatar_percentual(resumo.probabilidade_total),
        formatar_razao(resumo.probabilidade_total),
    )
    preco = preco_aposta(tipo, qtd)
    col3.metric("Custo da aposta", formatar_moeda(preco) if preco is not None else "tabela própria")

    st.dataframe(odds_dataframe(resumo.faixas), use_container_width=True)
    if tipo == TipoLoteria.SUPER_SETE:
        st.caption("Super Sete: estimativa por coluna, não é a regra oficial de combinação.")


def pagina_historico() -> None:
    st.title(f"Histórico de jogos - {config_loteria.label}")
    registros = historico.listar(tipo.value)
    if not registros:
        st.info("Nenhum jogo salvo para essa loteria.")
        return

    if st.button("Limpar histórico desta loteria"):
        historico.limpar(tipo.value)
        st.rerun()

    sorteadas: list[int] = []
    try:
        ultimo = (cargas.carregar("historico_ultimo", cliente.get_dashboard, tipo) or {}).get("ultimoConcurso") or {}
        sorteadas = ultimo.get("dezenas", [])
    except Exception as e:
        logger.warning(f"Sem último concurso para conferir o histórico: {e}")

    for registro in registros:
        with st.expander(f"{registro.gerado_em} - {registro.estrategia} ({len(registro.jogos)} jogos)"):
            if sorteadas:
                df_sim = simular_acertos(registro.jogos, sorteadas)
                st.dataframe(df_sim, use_container_width=True)
                st.dataframe(resumo_acertos(df_sim), use_container_width=True)
            else:
                for jogo in registro.jogos:
                    st.code(formatar_jogo(jogo))
            if st.button("Remover", key=f"rm_{registro.id}"):
                historico.remover(registro.id)
                st.rerun()


def pagina_financeiro() -> None:
    st.title(f"Análise financeira - {config_loteria.label}")
    dados = cargas.carregar("financeiro", cliente.get_financeiro, tipo)
    resumo = dados.get("resumo") or {}
    col1, col2, col3 = st.columns(3)
    col1.metric("Total arrecadado", formatar_moeda_curta(resumo.get("totalArrecadado")))
    col2.metric("Prêmios pagos", formatar_moeda_curta(resumo.get("totalPremiosPagos")))
    col3.metric("Retorno em prêmios", f"{resumo.get('percentualRetornoPremios', 0):.1f}%")

    mensal = pd.DataFrame(dados.get("evolucaoMensal") or [])
    if not mensal.empty:
        st.markdown("### Evolução mensal")
        st.line_chart(mensal.set_index("mesAno")[["totalArrecadado", "totalPremios"]])

    ultimos = pd.DataFrame(dados.get("ultimosConcursos") or [])
    if not ultimos.empty:
        st.markdown("### Últimos concursos")
        st.dataframe(ultimos, use_container_width=True)


def pagina_tendencias() -> None:
    st.title(f"Tendências - {config_loteria.label}")
    dados = cargas.carregar("tendencias", cliente.get_tendencias, tipo)
    st.caption(f"{dados.get('totalConcursosAnalisados', 0)} concursos analisados")
    tab_q, tab_f, tab_e, tab_p, tab_m = st.tabs(
        ["Quentes", "Frias", "Emergentes", "Padrões vencedores", "Histórico mensal"]
    )
    with tab_q:
        st.dataframe(pd.DataFrame(dados.get("tendenciasQuentes") or []), use_container_width=True)
    with tab_f:
        st.dataframe(pd.DataFrame(dados.get("tendenciasFrias") or []), use_container_width=True)
    with tab_e:
        st.dataframe(pd.DataFrame(dados.get("tendenciasEmergentes") or []), use_container_width=True)
    with tab_p:
        st.dataframe(pd.DataFrame(dados.get("padroesVencedores") or []), use_container_width=True)
    with tab_m:
        painel("histórico mensal", _painel_historico_mensal)


def _painel_historico_mensal() -> None:
    meses = historico_mensal_dataframe(cargas.carregar("historico_mensal", cliente.get_historico_mensal, tipo) or [])
    if meses.empty:
        st.info("Sem histórico mensal para essa loteria.")
        return
    st.dataframe(
        meses[["mes_ano", "mais_frequentes", "menos_frequentes"]],
        use_container_width=True,
        hide_index=True,
    )


def pagina_ranking() -> None:
    st.title(f"Ranking de números - {config_loteria.label}")
    ordenar_por = st.radio(
        "Ordenar por",
        ORDENACOES_RANKING,
        format_func={"score": "Score de tendência", "frequencia": "Frequência", "atraso": "Atraso"}.get,
        horizontal=True,
    )
    df = ranking_dataframe(cargas.carregar("ranking", cliente.get_ranking_numeros, tipo) or [], ordenar_por)
    if df.empty:
        st.info("Sem dados de ranking para essa loteria.")
        return
    st.markdown("### Top 10")
    st.code(formatar_jogo(top_numeros(df)))
    st.dataframe(df, use_container_width=True, hide_index=True)


def pagina_ordem_sorteio() -> None:
    st.title(f"Ordem do sorteio - {config_loteria.label}")
    dados = cargas.carregar("ordem_sorteio", cliente.get_ordem_sorteio, tipo)
    if not dados.get("totalConcursosAnalisados"):
        st.info("Sem concursos com ordem de sorteio registrada.")
        return
    st.caption(f"{dados['totalConcursosAnalisados']} concursos analisados")
    col1, col2 = st.columns(2)
    with col1:
        st.markdown("### Primeira bola")
        st.dataframe(frequencia_posicional(dados.get("primeiraBola") or []), use_container_width=True, hide_index=True)
    with col2:
        st.markdown("### Última bola")
        st.dataframe(frequencia_posicional(dados.get("ultimaBola") or []), use_container_width=True, hide_index=True)


def pagina_ganhadores_uf() -> None:
    st.title(f"Ganhadores por estado - {config_loteria.label}")
    dados = cargas.carregar("ganhadores_uf", cliente.get_ganhadores_por_uf, tipo)
    df = ganhadores_por_uf(dados)
    col1, col2, col3 = st.columns(3)
    col1.metric("Ganhadores", dados.get("totalGanhadores", 0))
    col2.metric("Estados", len(df))
    col3.metric("Concursos analisados", dados.get("totalConcursosAnalisados", 0))
    if df.empty:
        st.info("Nenhum ganhador registrado.")
        return
    st.bar_chart(df.set_index("uf")["ganhadores"])
    st.dataframe(df, use_container_width=True, hide_index=True)


def pagina_time_coracao() -> None:
    st.title(f"Time do Coração / Mês da Sorte - {config_loteria.label}")
    if tipo not in (TipoLoteria.TIMEMANIA, TipoLoteria.DIA_DE_SORTE):
        st.info("Disponível apenas para Timemania e Dia de Sorte.")
        return
    dados = cargas.carregar("time_coracao", cliente.get_time_coracao, tipo)
    mais = dados.get("maisFrequente") or {}
    menos = dados.get("menosFrequente") or {}
    col1, col2, col3 = st.columns(3)
    col1.metric("Concursos analisados", dados.get("totalConcursosAnalisados", 0))
    col2.metric("Mais frequente", f"{mais.get('nome', '—')} ({mais.get('frequencia', 0)}x)")
    col3.metric("Menos frequente", f"{menos.get('nome', '—')} ({menos.get('frequencia', 0)}x)")
    st.dataframe(frequencia_itens(dados.get("frequenciaCompleta") or []), use_container_width=True, hide_index=True)


def pagina_especiais() -> None:
    st.title("Concursos especiais")
    dados = cargas.carregar("especiais", cliente.get_especiais)
    st.metric("Total acumulado para especiais", formatar_moeda(dados.get("totalAcumuladoEspeciais")))

    for lot in dados.get("loteriasComEspecial") or []:
        st.markdown(
            f"**{lot.get('nome', '')}** - {lot.get('nomeEspecial') or 'Especial'}: "
            f"concurso {lot.get('numeroConcursoFinalEspecial') or '-'}, "
            f"acumulado {formatar_moeda_curta(lot.get('valorAcumuladoConcursoEspecial'))}"
        )

    proximos = proximos_especiais(dados)
    if not proximos.empty:
        st.markdown("### Próximos concursos especiais")
        st.dataframe(proximos, use_container_width=True, hide_index=True)


def pagina_dupla_sena() -> None:
    st.title("Dupla Sena: primeiro x segundo sorteio")
    dados = cargas.carregar("dupla_sena", cliente.get_dupla_sena)
    comparacao = dados.get("comparacao") or {}
    coincid = dados.get("coincidencias") or {}
    col1, col2, col3 = st.columns(3)
    col1.metric("Concursos analisados", dados.get("totalConcursosAnalisados", 0))
    col2.metric("Correlação", f"{comparacao.get('correlacao', 0):.3f}")
    col3.metric("Coincidências por concurso", f"{coincid.get('mediaCoincidencias', 0):.2f}")

    colq1, colq2, colq3 = st.columns(3)
    with colq1:
        st.markdown("Quentes no 1º sorteio")
        st.write(formatar_jogo(dados.get("numerosQuentesPrimeiroSorteio") or []))
    with colq2:
        st.markdown("Quentes no 2º sorteio")
        st.write(formatar_jogo(dados.get("numerosQuentesSegundoSorteio") or []))
    with colq3:
        st.markdown("Quentes nos dois")
        st.write(formatar_jogo(dados.get("numerosQuentesAmbos") or []))

    freq = dupla_sena_frequencias(comparacao)
    if not freq.empty:
        st.line_chart(freq.set_index("numero")[["primeiro_sorteio", "segundo_sorteio"]])
    dist = distribuicao_coincidencias(coincid)
    if not dist.empty:
        st.markdown("### Coincidências entre os sorteios")
        st.bar_chart(dist.set_index("coincidencias")["concursos"])

    ultimos = pd.DataFrame(dados.get("ultimosConcursos") or [])
    if not ultimos.empty:
        for coluna in ("dezenasPrimeiroSorteio", "dezenasSegundoSorteio"):
            ultimos[coluna] = ultimos[coluna].map(formatar_jogo)
        st.dataframe(ultimos, use_container_width=True, hide_index=True)


PAGINAS = {
    "Dashboard": pagina_dashboard,
    "Gerar jogos": pagina_gerar,
    "Gerar para várias loterias": pagina_gerar_varias,
    "Conferir aposta": pagina_conferir,
    "Probabilidades": pagina_probabilidades,
    "Histórico": pagina_historico,
    "Ranking de números": pagina_ranking,
    "Ordem do sorteio": pagina_ordem_sorteio,
    "Ganhadores por estado": pagina_ganhadores_uf,
    "Time do Coração / Mês da Sorte": pagina_time_coracao,
    "Financeiro": pagina_financeiro,
    "Tendências": pagina_tendencias,
    "Concursos especiais": pagina_especiais,
    "Dupla Sena": pagina_dupla_sena,
}

painel(pagina, PAGINAS[pagina])
