# app/services/api.py

import os
import requests

# Base URL of the FastAPI backend
FASTAPI_URL = os.getenv("BOOKING_API_URL", "http://localhost:8000")

TIMEOUT = 10


def _auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def _error_of(res, default):
    try:
        return res.json().get("error", default)
    except ValueError:
        return default


# -------------------------------
# Authentication-related functions
# -------------------------------

def register_user(username, password, email=None):
    """
    Creates an account. Does not log in.
    """
    try:
        res = requests.post(
            f"{FASTAPI_URL}/auth/register",
            json={"username": username, "email": email, "password": password},
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        return {"error": str(e)}
    if res.status_code == 201:
        return res.json()
    return {"error": _error_of(res, f"Error {res.status_code}")}


def login_user(username, password):
    """
    Logs in a user and returns {"token", "username"}.
    """
    try:
        res = requests.post(
            f"{FASTAPI_URL}/auth/login",
            json={"username": username, "password": password},
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        return {"error": str(e)}
    if res.status_code == 200:
        return res.json()
    return {"error": _error_of(res, f"Error {res.status_code}")}


def get_user_info(token):
    """
    Resolves the holder of a token. 401/403 mean the token is no longer usable.
    """
    try:
        res = requests.get(f"{FASTAPI_URL}/auth/me", headers=_auth_headers(token), timeout=TIMEOUT)
    except requests.RequestException as e:
        return {"error": str(e)}
    if res.status_code == 200:
        return res.json()
    return {"error": _error_of(res, f"Error {res.status_code}"), "status": res.status_code}


# -------------------------
# Reservations
# -------------------------

def list_reservas(token):
    """
    Lists the caller's reservations, most recent first.
    Returns {"error"} when the token is missing or expired.
    """
    try:
        res = requests.get(f"{FASTAPI_URL}/api/reservas", headers=_auth_headers(token), timeout=TIMEOUT)
    except requests.RequestException as e:
        return {"error": str(e)}
    if res.status_code == 200:
        return res.json()
    return {"error": _error_of(res, f"Error {res.status_code}"), "status": res.status_code}


def create_reserva(token, destino, precio, fecha_viaje):
    try:
        res = requests.post(
            f"{FASTAPI_URL}/api/reservas",
            json={"destino": destino, "precio": precio, "fecha_viaje": fecha_viaje},
            headers=_auth_headers(token),
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        return {"error": str(e)}
    if res.status_code == 200:
        return res.json()
    return {"error": _error_of(res, f"Error {res.status_code}"), "status": res.status_code}


def delete_reserva(token, reserva_id):
    try:
        res = requests.delete(
            f"{FASTAPI_URL}/api/reservas/{reserva_id}",
            headers=_auth_headers(token),
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        return {"error": str(e)}
    if res.status_code == 200:
        return res.json()
    return {"error": _error_of(res, f"Error {res.status_code}"), "status": res.status_code}


# -------------------------
# Contact
# -------------------------

def send_contacto(nombre, email, mensaje):
    try:
        res = requests.post(
            f"{FASTAPI_URL}/api/contacto",
            json={"nombre": nombre, "email": email, "mensaje": mensaje},
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        return {"error": str(e)}
    if res.status_code == 200:
        return res.json()
    return {"error": _error_of(res, f"Error {res.status_code}")}
