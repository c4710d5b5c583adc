"""
Streamlit operator console for apparel order pricing.

Features:
- Quote tab: price a single item with its resolution trace
- Batch tab: customer context, add items, grouped cart with totals
- Price Sheet tab: full product × size matrix
"""
import streamlit as st
import pandas as pd
from datetime import datetime

from pydantic import ValidationError

from apparel_pricing.config.settings import get_settings
from apparel_pricing.data.build_price_sheet import price_matrix
from apparel_pricing.engine import PricingEngine
from apparel_pricing.engine.models import Coverage, ProductType, format_trace
from apparel_pricing.engine.sizes import known_sizes
from apparel_pricing.orders.batch import Batch
from apparel_pricing.orders.validation import CustomerInput, OrderItemInput


st.set_page_config(
    page_title="Apparel Pricing Console",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def get_engine():
    """Get cached engine instance."""
    return PricingEngine()


@st.cache_resource
def get_settings_cached():
    """Get cached settings."""
    return get_settings()


@st.cache_data
def get_price_sheet() -> pd.DataFrame:
    return price_matrix(get_engine())


engine = get_engine()
settings = get_settings_cached()

if 'batch' not in st.session_state:
    st.session_state.batch = Batch(engine=engine)
batch: Batch = st.session_state.batch


def error_messages(exc: ValidationError) -> list[str]:
    return [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()]


# ============================================================================
# SIDEBAR: Customer Context
# ============================================================================
with st.sidebar:
    st.header("👤 Customer")

    with st.container(border=True):
        team_name = st.text_input("Team / Customer Name", key="team_name")
        fb_link = st.text_input("Facebook Link", key="fb_link")
        phone = st.text_input("Phone", key="phone", placeholder="09XX XXX XXXX")

        if st.button("Use Customer", type="primary"):
            try:
                batch.set_customer(CustomerInput(team_name=team_name, fb_link=fb_link, phone=phone))
                st.success(f"Adding items for {batch.customer.team_name}")
            except ValidationError as e:
                for msg in error_messages(e):
                    st.error(msg)

    if batch.customer:
        st.caption(f"**Current customer:** {batch.customer.team_name}")
    else:
        st.warning("No customer selected")


# ============================================================================
# MAIN CONTENT: TABBED INTERFACE
# ============================================================================
st.title("Apparel Pricing Console")
st.caption(f"Pricing Engine Active | {datetime.now().strftime('%Y-%m-%d')}")

tab1, tab2, tab3 = st.tabs(["⚡ Quote", "🧺 Batch", "📚 Price Sheet"])


# ============================================================================
# TAB 1: SINGLE QUOTE
# ============================================================================
with tab1:
    c1, c2, c3 = st.columns(3)
    with c1:
        q_product = st.selectbox("Product", [p.value for p in ProductType], key="q_product")
    with c2:
        q_coverage = st.selectbox("Coverage", [c.value for c in Coverage], key="q_coverage")
    with c3:
        q_size = st.text_input("Size", value="M", key="q_size")

    quote, trace = engine.quote_with_trace(q_product, q_coverage, q_size)

    m1, m2 = st.columns(2)
    m1.metric("Price", settings.format_amount(quote.price))
    m2.metric("Category", quote.category)

    if not quote.recognized:
        st.warning("Unrecognized product - flag this item for manual review")

    with st.expander("🔍 Resolution Details"):
        st.code(format_trace(trace), language=None)


# ============================================================================
# TAB 2: BATCH
# ============================================================================
with tab2:
    col1, col2 = st.columns([1.6, 1.4], gap="large")

    with col1:
        st.subheader("Add Item")
        with st.form("add_item", clear_on_submit=True):
            f1, f2 = st.columns(2)
            with f1:
                name_back = st.text_input("Player Name (Back)")
                jersey_number = st.text_input("Number")
                product = st.selectbox("Product", [p.value for p in ProductType])
                coverage = st.selectbox("Coverage", [c.value for c in Coverage])
            with f2:
                name_front = st.text_input("Player Name (Front)")
                size = st.selectbox("Size", list(known_sizes()), index=list(known_sizes()).index("M"))
                style = st.text_input("Fabric / Style", value="Polydex")

            if st.form_submit_button("➕ Add to Batch", type="primary"):
                try:
                    item = OrderItemInput(
                        player_name_back=name_back,
                        player_name_front=name_front,
                        jersey_number=jersey_number,
                        size=size,
                        style=style,
                        product_type=product,
                        coverage=coverage,
                    )
                    line = batch.add(item)
                    st.success(f"{line.product_type} for {line.player_name_back} added to batch")
                except ValidationError as e:
                    for msg in error_messages(e):
                        st.error(msg)
                except ValueError as e:
                    st.error(str(e))

    with col2:
        st.subheader("Current Batch")
        summary = batch.summary()

        m1, m2, m3 = st.columns(3)
        m1.metric("Items", summary.item_count)
        m2.metric("Customers", summary.customer_count)
        m3.metric("Total", settings.format_amount(summary.total))

        if not summary.item_count:
            st.info("No items added yet")

        for group in summary.groups.values():
            with st.container(border=True):
                st.markdown(f"**{group.customer_name}** · {settings.format_amount(group.subtotal)}")
                for line in group.items:
                    cols = st.columns([5, 1])
                    front = f" ({line.player_name_front})" if line.player_name_front else ""
                    cols[0].caption(
                        f"{line.player_name_back}{front} · {line.product_type} · #{line.jersey_number} · "
                        f"{line.size} · {line.style} · {settings.format_amount(line.price or 0)}"
                    )
                    if cols[1].button("🗑️", key=f"remove_{line.id}"):
                        batch.remove(line.id)
                        st.rerun()

        if summary.item_count:
            with st.expander("📋 Order Rows"):
                st.dataframe(pd.DataFrame(batch.to_order_rows()), use_container_width=True, hide_index=True)
            if st.button("Clear Batch"):
                batch.clear()
                st.rerun()


# ============================================================================
# TAB 3: PRICE SHEET
# ============================================================================
with tab3:
    sheet = get_price_sheet()
    product_filter = st.multiselect("Products", sheet['Product'].unique().tolist())
    if product_filter:
        sheet = sheet[sheet['Product'].isin(product_filter)]
    st.dataframe(sheet, use_container_width=True, hide_index=True)
