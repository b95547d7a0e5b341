import streamlit as st
from utils.api import APIClient, error_message
from utils.formatters import format_currency, format_date, format_percent
from utils.styles import result_card
from config import API_URL, DEFAULT_TIP_PERCENT

api = APIClient(API_URL)


def render():
    st.title("Split a bill")

    col1, col2, col3 = st.columns(3)
    with col1:
        bill = st.number_input("Bill amount", min_value=0.0, step=1.0, format="%.2f")
    with col2:
        tip = st.slider("Tip %", min_value=0, max_value=100, value=DEFAULT_TIP_PERCENT)
    with col3:
        people = st.number_input("People", min_value=1, step=1, value=1)

    if bill > 0:
        result = api.preview_calculation(bill, tip, int(people))
        if result["status"] == 200:
            split = result["data"]
            c1, c2, c3 = st.columns(3)
            c1.markdown(result_card("Tip", format_currency(split["tip_amount"])), unsafe_allow_html=True)
            c2.markdown(result_card("Total", format_currency(split["total_amount"])), unsafe_allow_html=True)
            c3.markdown(result_card("Per person", format_currency(split["per_person_amount"])), unsafe_allow_html=True)

            with st.form("save_calculation_form"):
                name = st.text_input("Save as", placeholder="Friday dinner")
                if st.form_submit_button("Save"):
                    if not name.strip():
                        st.warning("Please enter a name")
                    else:
                        saved = api.save_calculation(name, bill, tip, int(people))
                        if saved["status"] == 201:
                            st.success("Calculation saved")
                            st.rerun()
                        else:
                            st.error(error_message(saved, "Could not save calculation"))
        else:
            st.error(error_message(result, "Could not calculate"))
    else:
        st.info("Enter a bill amount to see the split.")

    st.divider()
    st.subheader("Saved bills")

    saved = api.list_calculations()
    if saved["status"] != 200:
        st.error(error_message(saved, "Unable to load saved bills"))
        return
    if not saved["data"]:
        st.caption("No saved bills yet.")
        return

    for calc in saved["data"]:
        col1, col2, col3 = st.columns([4, 4, 1])
        col1.write(f"**{calc['name']}**  \n{format_date(calc['created_at'])}")
        col2.write(
            f"{format_currency(calc['bill'])} + {format_percent(calc['tip'])} tip, "
            f"{calc['people']} people: {format_currency(calc['per_person_amount'])} each"
        )
        if col3.button("Delete", key=f"del_calc_{calc['id']}"):
            result = api.delete_calculation(calc["id"])
            if result["status"] == 204:
                st.rerun()
            else:
                st.error(error_message(result, "Could not delete"))
