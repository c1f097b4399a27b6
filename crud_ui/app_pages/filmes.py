from __future__ import annotations

import streamlit as st

from crud_ui import forms, state
from crud_ui.api_client import ResourceClient
from crud_ui.components import confirm_delete, load_items, render_alerts, run_mutation


def _render_form(client: ResourceClient, ui: dict) -> None:
    editing = ui["editing"]
    defaults = forms.filme_form_defaults(editing)
    form_key = f"filme_form_{editing['id'] if editing else 'new'}"

    st.subheader("✏️ Editar Filme" if editing else "➕ Adicionar Novo Filme")
    with st.form(form_key, clear_on_submit=not editing):
        col1, col2 = st.columns(2)
        with col1:
            nome = st.text_input("Nome:", value=defaults["nome"])
        with col2:
            genero = st.text_input("Gênero:", value=defaults["genero"])
        descricao = st.text_area("Descrição:", value=defaults["descricao"])
        col3, col4 = st.columns(2)
        with col3:
            duracao = st.number_input("Duração (min):", min_value=1, value=defaults["duracao"], step=1)
        with col4:
            anolancamento = st.number_input(
                "Ano de lançamento:", min_value=1900, value=defaults["anolancamento"], step=1
            )

        col_save, col_cancel = st.columns([1, 4])
        with col_save:
            submitted = st.form_submit_button("💾 Atualizar Filme" if editing else "✅ Salvar Filme")
        with col_cancel:
            cancelled = st.form_submit_button("❌ Cancelar", key=f"{form_key}_cancel") if editing else False

    if cancelled:
        ui["editing"] = None
        st.rerun()
    if not submitted:
        return

    payload = forms.filme_payload(nome, descricao, genero, duracao, anolancamento)
    if editing:
        ok = run_mutation(ui, lambda: client.update(editing["id"], payload), "Filme atualizado com sucesso!")
    else:
        ok = run_mutation(ui, lambda: client.create(payload), "Filme criado com sucesso!")
    if ok:
        ui["editing"] = None
    st.rerun()


def _render_table(client: ResourceClient, ui: dict) -> None:
    filmes = ui["items"]
    if ui["loading"]:
        st.info("Carregando filmes...")
        return
    if ui["error"]:
        st.error(f"Erro: {ui['error']}. Verifique se a API está rodando.")
    if not filmes:
        st.markdown("### 🎬 Nenhum filme encontrado")
        st.caption("Adicione o primeiro filme usando o formulário acima.")
        return

    widths = [1, 3, 2, 1, 1, 2, 3]
    header = st.columns(widths)
    for col, title in zip(header, ["ID", "Nome", "Gênero", "Duração", "Ano", "Criado em", "Ações"]):
        col.markdown(f"**{title}**")

    for filme in filmes:
        cols = st.columns(widths)
        cols[0].write(filme["id"])
        cols[1].write(filme["nome"])
        cols[2].write(filme["genero"])
        cols[3].write(f"{filme['duracao']} min")
        cols[4].write(filme["anolancamento"])
        cols[5].write(forms.format_date(filme.get("createdAt")))
        with cols[6]:
            edit_col, delete_col = st.columns(2)
            if edit_col.button("✏️ Editar", key=f"filme_edit_{filme['id']}"):
                ui["editing"] = filme
                st.rerun()
            if delete_col.button("🗑️ Excluir", key=f"filme_delete_{filme['id']}"):
                confirm_delete(
                    client,
                    ui,
                    filme["id"],
                    f"Tem certeza que deseja excluir **{filme['nome']}**?",
                    "Filme excluído com sucesso!",
                )


def render(client: ResourceClient) -> None:
    ui = state.init("filmes")
    render_alerts(ui, key="filmes")

    _render_form(client, ui)
    st.divider()

    col_title, col_refresh = st.columns([5, 1])
    with col_title:
        st.subheader("🎬 Lista de Filmes")
    with col_refresh:
        st.button("🔄 Atualizar", key="filmes_refresh")

    table_slot = st.empty()
    load_items(client, ui, table_slot, lambda: _render_table(client, ui))
