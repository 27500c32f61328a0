# app/ui/reservas.py

import streamlit as st
from services.api import list_reservas, create_reserva, delete_reserva

DESTINOS = ["Lima", "Cusco", "Arequipa", "Iquitos", "Puno"]


def reservas_page(on_expired):
    st.title("✈️ Mis Viajes")

    token = st.session_state["token"]

    with st.form("nueva_reserva", clear_on_submit=True):
        destino = st.selectbox("Destino", options=DESTINOS)
        precio = st.text_input("Precio")
        fecha = st.date_input("Fecha de viaje")
        submitted = st.form_submit_button("Guardar viaje")

    if submitted:
        result = create_reserva(token, destino, precio, fecha.isoformat())
        if result.get("error"):
            handle_error(result, on_expired)
        else:
            st.success("✅ Guardado")

    viajes = list_reservas(token)
    if isinstance(viajes, dict):
        handle_error(viajes, on_expired)
        return

    if not viajes:
        st.info("Todavía no tienes viajes.")
        return

    for v in viajes:
        col1, col2, col3, col4 = st.columns([4, 2, 3, 1])
        col1.markdown(f"**{v['destino']}**")
        col2.write(v["precio"])
        col3.write(v["fecha_viaje"])
        if col4.button("X", key=f"del_{v['id']}"):
            result = delete_reserva(token, v["id"])
            if result.get("error"):
                handle_error(result, on_expired)
            else:
                st.rerun()


def handle_error(result, on_expired):
    # 401/403 mean the stored token is gone or expired
    if result.get("status") in (401, 403):
        st.warning("Tu sesión expiró. Inicia sesión otra vez.")
        on_expired()
        st.rerun()
    st.error(f"❌ {result['error']}")
