# app/ui/login.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from services.api import get_user_info, login_user, register_user

load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD")

cookies = EncryptedCookieManager(password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def logout():
    # The server keeps no session; forgetting the token is the whole logout.
    for key in ("token", "username"):
        if key in cookies:
            del cookies[key]
    cookies.save()


def login_page():
    st.title("🔐 Iniciar Sesión")

    if "token" not in st.session_state:
        if cookies.get("token"):
            info = get_user_info(cookies["token"])
            if info.get("status") in (401, 403):
                # Expired or foreign token; drop it and ask for credentials
                logout()
            else:
                st.session_state["token"] = cookies["token"]
                st.session_state["username"] = info.get("username") or cookies.get("username", "")
                st.rerun()

    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form()
    else:
        show_login_form()


def show_login_form():
    with st.form("login_form"):
        username = st.text_input("Usuario")
        password = st.text_input("Contraseña", type="password")
        submitted = st.form_submit_button("Entrar")

    if submitted:
        if not username or not password:
            st.warning("Llena los campos")
            return
        with st.spinner("Entrando..."):
            result = login_user(username, password)
        if result.get("error"):
            st.error(f"❌ {result['error']}")
        else:
            st.session_state["token"] = result["token"]
            st.session_state["username"] = result["username"]
            cookies["token"] = result["token"]
            cookies["username"] = result["username"]
            cookies.save()
            st.rerun()

    if st.button("¿No tienes cuenta? Regístrate"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form():
    st.subheader("📝 Crear Cuenta")

    new_user = st.text_input("Usuario", key="new_user")
    new_email = st.text_input("Email", key="new_email")
    new_pass = st.text_input("Contraseña", type="password", key="new_pass")

    if st.button("Registrarme"):
        if not new_user or not new_pass:
            st.warning("Llena los campos")
            return
        with st.spinner("Creando cuenta..."):
            result = register_user(new_user, new_pass, email=new_email or None)
        if result.get("error"):
            st.error(f"❌ {result['error']}")
        else:
            st.success("¡Cuenta creada! Ahora inicia sesión.")
            st.session_state["show_register"] = False
            st.rerun()

    if st.button("¿Ya tienes cuenta? Entra"):
        st.session_state["show_register"] = False
        st.rerun()
