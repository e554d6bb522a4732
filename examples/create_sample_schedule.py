"""Script to create a sample cable schedule and tenant list for testing."""

import pandas as pd
from pathlib import Path


def create_sample_schedule():
    """Create a sample cable schedule Excel file and tenant list CSV."""

    # Sample cable data
    cables = [
        # Main board to sub boards
        {"Cable Tag": "MSB-DB1", "From": "MSB", "To": "DB-1", "Cable Size": "185mm²", "Cable Type": "Aluminium", "Installation Method": "ground", "Total Length": 85, "Supply Cost": 9350.00, "Install Cost": 2125.00},
        {"Cable Tag": "MSB-DB2", "From": "MSB", "To": "DB-2", "Cable Size": "95mm²", "Cable Type": "Aluminium", "Installation Method": "ducts", "Total Length": 62, "Supply Cost": 3720.00, "Install Cost": 1240.00},

        # Legacy parallel cables: same tag and route, no group columns
        {"Cable Tag": "MSB-DB3 (1/2)", "From": "MSB", "To": "DB-3", "Cable Size": "240mm²", "Cable Type": "Aluminium", "Installation Method": "ground", "Total Length": 110, "Supply Cost": 15400.00, "Install Cost": 2750.00},
        {"Cable Tag": "MSB-DB3 (2/2)", "From": "MSB", "To": "DB-3", "Cable Size": "240mm²", "Cable Type": "Aluminium", "Installation Method": "ground", "Total Length": 110, "Supply Cost": 15400.00, "Install Cost": 2750.00},

        # Tenant supplies
        {"Cable Tag": "DB1-S1", "From": "DB-1", "To": "Shop 1 - Unknown", "Cable Size": "16mm²", "Cable Type": "Cu/PVC", "Installation Method": "air", "Measured Length": 24, "Extra Length": 3, "Supply Cost": 540.00, "Install Cost": 216.00},
        {"Cable Tag": "DB1-S2", "From": "DB-1", "To": "Shop 2", "Cable Size": "10mm²", "Cable Type": "Cu/PVC", "Installation Method": "air", "Measured Length": 31, "Extra Length": 3, "Supply Cost": 442.00, "Install Cost": 272.00},
        {"Cable Tag": "DB2-S10", "From": "DB-2", "To": "Shop 10", "Cable Size": "25mm²", "Cable Type": "Cu/PVC", "Installation Method": "ducts", "Measured Length": 18, "Extra Length": 2, "Supply Cost": 620.00, "Install Cost": 160.00},
        {"Cable Tag": "DB2-S12", "From": "DB-2", "To": "Shop 12", "Cable Size": "16mm²", "Cable Type": "Cu/PVC", "Installation Method": "ducts", "Measured Length": 22, "Extra Length": 2, "Supply Cost": 480.00, "Install Cost": 192.00},
        {"Cable Tag": "DB2-S12A", "From": "DB-2", "To": "Shop 12A", "Cable Size": "6mm²", "Cable Type": "Cu/PVC", "Installation Method": "ducts", "Measured Length": 26, "Extra Length": 2},
        {"Cable Tag": "DB3-S17", "From": "DB-3", "To": "Shop 17", "Cable Size": "70mm²", "Cable Type": "Aluminium", "Installation Method": "ground", "Total Length": 45, "Total Cost": 3150.00},
        {"Cable Tag": "DB3-S17B", "From": "DB-3", "To": "Shop 17B", "Cable Size": "35mm²", "Cable Type": "Aluminium", "Installation Method": "ground", "Total Length": 48, "Total Cost": 2400.00},
        {"Cable Tag": "DB3-S13", "From": "DB-3", "To": "Shop 13/14 - MR DIY", "Cable Size": "50mm²", "Cable Type": "Aluminium", "Installation Method": "ground", "Total Length": 52},
    ]

    tenants = [
        {"Shop Number": "1", "Shop Name": "Pick n Pay"},
        {"Shop Number": "2", "Shop Name": "Clicks"},
        {"Shop Number": "10", "Shop Name": "Woolworths"},
        {"Shop Number": "12A", "Shop Name": "Mr Price"},
        {"Shop Number": "13", "Shop Name": "MR DIY"},
    ]

    df = pd.DataFrame(cables)
    df["Voltage"] = 400
    df["Notes"] = ""

    # Save to Excel
    output_dir = Path(__file__).parent
    output_path = output_dir / "sample_cable_schedule.xlsx"
    tenants_path = output_dir / "sample_tenants.csv"

    df.to_excel(output_path, index=False, sheet_name="Cable Schedule")
    pd.DataFrame(tenants).to_csv(tenants_path, index=False)

    print(f"Created sample cable schedule: {output_path}")
    print(f"Created sample tenant list: {tenants_path}")
    print(f"Total cables: {len(cables)}")
    print("\nCables by origin:")
    for origin in df["From"].unique():
        count = len(df[df["From"] == origin])
        print(f"  {origin}: {count} cables")

    return output_path


if __name__ == "__main__":
    create_sample_schedule()
