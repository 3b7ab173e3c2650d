"""
Savings Calculator

Turns a segment and per-device quantities into the savings estimate shown
on the last wizard step. Pure functions only: no Streamlit, no state.
"""

from math import ceil
from typing import Dict, Mapping, Optional

import pandas as pd

from constants import (
    DEVICE_CATALOG,
    PLUG_GROUP_SIZES,
    ENERGY_RATE_PER_KWH,
    MONTHS_PER_YEAR,
    GAIN_SHARE_RATE,
)
from savings_wizard import Segment, SavingsResult


BREAKDOWN_COLUMNS = [
    'Device',
    'Quantity',
    'Waste per Unit (kWh/yr)',
    'Annual Waste (kWh)',
    'Plugs',
    'Annual Savings',
]


class SavingsCalculator:
    """Calculate energy waste, plug counts and savings for a facility"""

    @staticmethod
    def plugs_for(device_name: str, quantity: int) -> int:
        """
        Number of smart plugs needed for `quantity` units of a device.

        Grouped devices share one plug per group (rounded up), all others
        need one plug per unit.
        """
        if quantity <= 0:
            return 0
        group_size = PLUG_GROUP_SIZES.get(device_name, 1)
        return ceil(quantity / group_size)

    @staticmethod
    def segment_devices(
        segment: Optional[Segment],
        catalog: Optional[Mapping[str, Mapping[str, float]]] = None
    ) -> Dict[str, float]:
        """Get the device -> kWh/year mapping for a segment (empty if none)."""
        if segment is None:
            return {}
        catalog = DEVICE_CATALOG if catalog is None else catalog
        return dict(catalog.get(segment.value, {}))

    @classmethod
    def calculate(
        cls,
        segment: Optional[Segment],
        quantities: Mapping[str, int],
        catalog: Optional[Mapping[str, Mapping[str, float]]] = None
    ) -> SavingsResult:
        """
        Calculate the savings estimate.

        Args:
            segment: Selected customer segment, or None
            quantities: Device name -> unit count
            catalog: Optional device catalog, defaults to DEVICE_CATALOG

        Returns:
            SavingsResult (all zero when no segment is selected)
        """
        devices = cls.segment_devices(segment, catalog)
        if not devices:
            return SavingsResult()

        annual_energy_waste = 0.0
        number_of_plugs = 0
        for device_name, quantity in quantities.items():
            waste_per_unit = devices.get(device_name)
            if waste_per_unit is None:
                continue
            quantity = max(0, quantity)
            annual_energy_waste += waste_per_unit * quantity
            number_of_plugs += cls.plugs_for(device_name, quantity)

        annual_gross = annual_energy_waste * ENERGY_RATE_PER_KWH
        monthly_savings = annual_gross / MONTHS_PER_YEAR
        gain_share = monthly_savings * GAIN_SHARE_RATE
        final_savings = monthly_savings - gain_share

        return SavingsResult(
            annual_energy_waste=annual_energy_waste,
            annual_gross=annual_gross,
            monthly_savings=monthly_savings,
            gain_share=gain_share,
            final_savings=final_savings,
            number_of_plugs=number_of_plugs,
        )

    @classmethod
    def device_breakdown(
        cls,
        segment: Optional[Segment],
        quantities: Mapping[str, int],
        catalog: Optional[Mapping[str, Mapping[str, float]]] = None
    ) -> pd.DataFrame:
        """
        Per-device breakdown for the results table.

        Rows follow catalog order and only include devices with a non-zero
        quantity.
        """
        devices = cls.segment_devices(segment, catalog)
        rows = []
        for device_name, waste_per_unit in devices.items():
            quantity = quantities.get(device_name, 0)
            if quantity <= 0:
                continue
            annual_waste = waste_per_unit * quantity
            rows.append({
                'Device': device_name,
                'Quantity': quantity,
                'Waste per Unit (kWh/yr)': waste_per_unit,
                'Annual Waste (kWh)': annual_waste,
                'Plugs': cls.plugs_for(device_name, quantity),
                'Annual Savings': annual_waste * ENERGY_RATE_PER_KWH,
            })

        return pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)


def calculate_savings(
    segment: Optional[Segment],
    quantities: Mapping[str, int],
    catalog: Optional[Mapping[str, Mapping[str, float]]] = None
) -> SavingsResult:
    """Convenience wrapper around SavingsCalculator.calculate."""
    return SavingsCalculator.calculate(segment, quantities, catalog)
