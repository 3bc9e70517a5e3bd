import streamlit as st
import requests

from app.client import ApiError, TravelApiClient
from app.core.config import BACKEND_URL

# --- Configuration ---
# Prioritize Secrets -> Environment Variable -> Localhost
try:
    API_URL = st.secrets["BACKEND_URL"]
except (FileNotFoundError, KeyError):
    API_URL = BACKEND_URL

st.set_page_config(page_title="AI Travel Companion", page_icon="✈️", layout="wide")

# --- CSS / Aesthetics ---
st.markdown("""
<style>
    .stButton>button {
        width: 100%;
        border-radius: 20px;
    }
    .item-meta {
        font-size: 0.8rem;
        color: #6b7280;
    }
</style>
""", unsafe_allow_html=True)

# --- Session State Management ---
if 'user' not in st.session_state:
    st.session_state.user = None  # {"username": ..., "user_id": ...}
if 'editing' not in st.session_state:
    st.session_state.editing = {}  # resource -> item being edited

client = TravelApiClient(API_URL)


# --- API Helpers ---
def api_call(fn, *args):
    """Runs a client call, reporting failures in the page instead of raising."""
    try:
        return fn(*args)
    except ApiError as e:
        st.error(e.message)
    except requests.exceptions.ConnectionError:
        st.error(f"❌ Could not connect to backend at {API_URL}. Is the server running?")
    return None


# --- Account Sidebar ---
def render_account():
    with st.sidebar:
        st.header("👤 Account")

        if st.session_state.user:
            st.success(f"Signed in as {st.session_state.user['username']}")
            if st.button("Sign out"):
                st.session_state.user = None
                st.rerun()
            return

        tab1, tab2 = st.tabs(["Login", "Register"])

        with tab1:
            email = st.text_input("Email", key="login_email")
            password = st.text_input("Password", type="password", key="login_pass")
            if st.button("Login", type="primary"):
                res = api_call(client.login, email, password)
                if res:
                    st.session_state.user = {"username": res["username"], "user_id": res["user_id"]}
                    st.rerun()

        with tab2:
            username = st.text_input("Username", key="reg_username")
            reg_email = st.text_input("Email", key="reg_email")
            reg_pass = st.text_input("Password", type="password", key="reg_pass")
            if st.button("Register"):
                if api_call(client.register, username, reg_email, reg_pass):
                    st.success("Registered! You can now login.")


# --- Forms ---
def hotel_form(initial):
    name = st.text_input("Name", value=initial.get("name", ""))
    price = st.number_input("Price per night", min_value=0.0, value=float(initial.get("price_per_night", 0)))
    rating = st.number_input("Rating", min_value=0.0, max_value=5.0, step=0.1, value=float(initial.get("rating", 0)))
    address = st.text_input("Address", value=initial.get("address", ""))
    source = st.text_input("Source", value=initial.get("source", ""))
    return {"name": name, "price_per_night": price, "rating": rating, "address": address, "source": source}


def restaurant_form(initial):
    name = st.text_input("Name", value=initial.get("name", ""))
    rating = st.number_input("Rating", min_value=0.0, max_value=5.0, step=0.1, value=float(initial.get("rating", 0)))
    price_range = st.text_input("Price range", value=initial.get("price_range", ""))
    address = st.text_input("Address", value=initial.get("address", ""))
    source = st.text_input("Source", value=initial.get("source", ""))
    return {"name": name, "rating": rating, "price_range": price_range, "address": address, "source": source}


TRANSPORT_TYPES = ["taxi", "rental", "public"]


def transport_form(initial):
    kind = st.selectbox(
        "Type", TRANSPORT_TYPES, index=TRANSPORT_TYPES.index(initial.get("type", "taxi"))
    )
    name = st.text_input("Name", value=initial.get("name", ""))
    price = st.number_input("Price", min_value=0.0, value=float(initial.get("price", 0)))
    availability = st.checkbox("Available", value=initial.get("availability", True))
    return {"type": kind, "name": name, "price": price, "availability": availability}


def trip_form(initial):
    col1, col2 = st.columns(2)
    with col1:
        start_date = st.text_input("Start date (YYYY-MM-DD)", value=initial.get("start_date", ""))
        destination = st.text_input("Destination", value=initial.get("destination", ""))
        food_choice = st.text_input("Food choice", value=initial.get("food_choice") or "")
    with col2:
        end_date = st.text_input("End date (YYYY-MM-DD)", value=initial.get("end_date", ""))
        budget = st.number_input("Budget", min_value=0.0, value=float(initial.get("budget") or 0))
        transport_mode = st.text_input("Transport mode", value=initial.get("transport_mode") or "")
    return {
        "start_date": start_date,
        "end_date": end_date,
        "destination": destination,
        "budget": budget or None,
        "food_choice": food_choice or None,
        "transport_mode": transport_mode or None,
    }


# --- Cards ---
def hotel_card(h):
    return h["name"], h["address"], [f"${h['price_per_night']}/night", f"Rating: {h['rating']}", f"Source: {h['source']}"]


def restaurant_card(r):
    return r["name"], r["address"], [f"Rating: {r['rating']}", f"Price: {r['price_range']}", f"Source: {r['source']}"]


def transport_card(t):
    return f"{t['name']} ({t['type']})", "Available" if t["availability"] else "Unavailable", [f"Price: {t['price']}"]


def trip_card(t):
    return t["destination"], f"{t['start_date']} → {t['end_date']}", [
        f"Budget: {t.get('budget') or 'N/A'}",
        f"Food: {t.get('food_choice') or 'N/A'}",
    ]


RESOURCES = {
    "Hotels": ("hotel", "hotels", "id", hotel_form, hotel_card),
    "Restaurants": ("restaurant", "restaurants", "id", restaurant_form, restaurant_card),
    "Transport": ("transport option", "transport", "id", transport_form, transport_card),
    "Itineraries": ("trip", "itinerary", "trip_id", trip_form, trip_card),
}


# --- Views ---
def render_resource(title):
    singular, resource, id_field, form, card = RESOURCES[title]
    st.title(title)

    editing = st.session_state.editing.get(resource)
    with st.expander(f"Edit {singular}" if editing else f"Add {singular}", expanded=bool(editing)):
        with st.form(f"{resource}_form"):
            payload = form(editing or {})
            submitted = st.form_submit_button("Save", type="primary")
        if submitted:
            if editing:
                ok = api_call(client.update_item, resource, editing[id_field], payload)
            else:
                ok = api_call(client.create_item, resource, payload)
            if ok:
                st.session_state.editing.pop(resource, None)
                st.rerun()
        if editing and st.button("Cancel edit"):
            st.session_state.editing.pop(resource, None)
            st.rerun()

    items = api_call(client.get_all, resource)
    if not items:
        st.info(f"No {title.lower()} yet.")
        return

    for item in items:
        heading, subtitle, meta = card(item)
        with st.container(border=True):
            st.subheader(heading)
            st.caption(subtitle)
            st.markdown(f"<div class='item-meta'>{' · '.join(meta)}</div>", unsafe_allow_html=True)
            for day in item.get("itinerary", []):
                st.markdown(f"**{day.get('date')}**")
                for act in day.get("activities", []):
                    st.markdown(f"- {act.get('name')} · {act.get('type')} · ${act.get('price')}")
            col1, col2 = st.columns(2)
            if col1.button("Edit", key=f"edit_{item[id_field]}"):
                st.session_state.editing[resource] = item
                st.rerun()
            if col2.button("Delete", key=f"delete_{item[id_field]}"):
                if api_call(client.delete_item, resource, item[id_field]):
                    st.rerun()


# --- Main App ---
render_account()

# Top Nav (Radio or Buttons)
view = st.radio("Navigation", list(RESOURCES), horizontal=True, label_visibility="collapsed")
render_resource(view)
