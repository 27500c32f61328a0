# app/main.py

import streamlit as st
from dotenv import load_dotenv
from ui.login import login_page, logout
from ui.reservas import reservas_page
from ui.contacto import contacto_page


load_dotenv()


def end_session():
    logout()
    st.session_state.clear()


def main_page():
    st.title(f"Hola, {st.session_state['username']}!")

    st.sidebar.markdown("## 📋 Menú")

    if st.sidebar.button("✈️ Mis Viajes"):
        st.session_state["page"] = "reservas"
    if st.sidebar.button("📩 Contacto"):
        st.session_state["page"] = "contacto"
    if st.sidebar.button("🔓 Salir"):
        end_session()
        st.rerun()

    page = st.session_state.get("page", "reservas")
    if page == "reservas":
        reservas_page(on_expired=end_session)
    elif page == "contacto":
        contacto_page()


if "token" not in st.session_state:
    login_page()
    st.divider()
    contacto_page()
else:
    main_page()
