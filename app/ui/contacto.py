# app/ui/contacto.py

import streamlit as st
from services.api import send_contacto


def contacto_page():
    st.title("📩 Contacto")

    with st.form("contacto_form", clear_on_submit=True):
        nombre = st.text_input("Nombre")
        email = st.text_input("Email")
        mensaje = st.text_area("Mensaje")
        submitted = st.form_submit_button("Enviar")

    if submitted:
        result = send_contacto(nombre, email, mensaje)
        if result.get("error"):
            st.error(f"❌ {result['error']}")
        else:
            st.success("✅ Enviado")
