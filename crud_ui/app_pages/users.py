from __future__ import annotations

import streamlit as st

from crud_ui import forms, state
from crud_ui.api_client import ResourceClient
from crud_ui.components import confirm_delete, load_items, render_alerts, run_mutation

FILTER_OPTIONS = {
    "Todos os usuários": None,
    "Apenas ativos": True,
    "Apenas inativos": False,
}


def _render_form(client: ResourceClient, ui: dict) -> None:
    editing = ui["editing"]
    defaults = forms.user_form_defaults(editing)
    form_key = f"user_form_{editing['id'] if editing else 'new'}"

    st.subheader("✏️ Editar Usuário" if editing else "➕ Adicionar Novo Usuário")
    with st.form(form_key, clear_on_submit=not editing):
        col1, col2, col3 = st.columns(3)
        with col1:
            name = st.text_input("Nome completo:", value=defaults["name"])
        with col2:
            email = st.text_input("E-mail:", value=defaults["email"])
        with col3:
            age = st.number_input("Idade:", min_value=1, max_value=120, value=defaults["age"], step=1)
        status = st.selectbox("Status:", ["Ativo", "Inativo"], index=0 if defaults["isActive"] else 1)

        col_save, col_cancel = st.columns([1, 4])
        with col_save:
            submitted = st.form_submit_button("💾 Atualizar Usuário" if editing else "✅ Salvar Usuário")
        with col_cancel:
            cancelled = st.form_submit_button("❌ Cancelar", key=f"{form_key}_cancel") if editing else False

    if cancelled:
        ui["editing"] = None
        st.rerun()
    if not submitted:
        return

    payload = forms.user_payload(name, email, age, status == "Ativo")
    if editing:
        ok = run_mutation(ui, lambda: client.update(editing["id"], payload), "Usuário atualizado com sucesso!")
    else:
        ok = run_mutation(ui, lambda: client.create(payload), "Usuário criado com sucesso!")
    if ok:
        ui["editing"] = None
    st.rerun()


def _render_table(client: ResourceClient, ui: dict) -> None:
    users = ui["items"]
    if ui["loading"]:
        st.info("Carregando usuários...")
        return
    if ui["error"]:
        st.error(f"Erro: {ui['error']}. Verifique se a API está rodando.")
    if not users:
        st.markdown("### 📝 Nenhum usuário encontrado")
        st.caption("Adicione o primeiro usuário usando o formulário acima.")
        return

    widths = [1, 3, 4, 1, 2, 2, 3]
    header = st.columns(widths)
    for col, title in zip(header, ["ID", "Nome", "E-mail", "Idade", "Status", "Criado em", "Ações"]):
        col.markdown(f"**{title}**")

    for user in users:
        cols = st.columns(widths)
        cols[0].write(user["id"])
        cols[1].write(user["name"])
        cols[2].write(user["email"])
        cols[3].write(user.get("age") or "-")
        cols[4].write("🟢 Ativo" if user.get("isActive") else "🔴 Inativo")
        cols[5].write(forms.format_date(user.get("createdAt")))
        with cols[6]:
            edit_col, delete_col = st.columns(2)
            if edit_col.button("✏️ Editar", key=f"user_edit_{user['id']}"):
                ui["editing"] = user
                st.rerun()
            if delete_col.button("🗑️ Excluir", key=f"user_delete_{user['id']}"):
                confirm_delete(
                    client,
                    ui,
                    user["id"],
                    "Tem certeza que deseja excluir este usuário?",
                    "Usuário excluído com sucesso!",
                )


def render(client: ResourceClient) -> None:
    """Aba de usuários: formulário, filtro de status e tabela."""
    ui = state.init("users")
    render_alerts(ui, key="users")

    _render_form(client, ui)
    st.divider()

    col_title, col_filter, col_refresh = st.columns([3, 2, 1])
    with col_title:
        st.subheader("👥 Lista de Usuários")
    with col_filter:
        labels = list(FILTER_OPTIONS)
        current = next(label for label, value in FILTER_OPTIONS.items() if value == ui["filter"])
        choice = st.selectbox("Filtro", labels, index=labels.index(current), label_visibility="collapsed")
        ui["filter"] = FILTER_OPTIONS[choice]
    with col_refresh:
        st.button("🔄 Atualizar", key="users_refresh")

    table_slot = st.empty()
    load_items(client, ui, table_slot, lambda: _render_table(client, ui), active=ui["filter"])
