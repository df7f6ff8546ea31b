"""
Example: Importing E-OBS Data as Tables

This example shows how to read a region and a period of an E-OBS variable,
either from the KNMI OPeNDAP server or from a downloaded netCDF file.
"""

import logging

import geopandas as gpd
from shapely.geometry import box

import eobs_reader as eobs

eobs.setup_logging(level=logging.INFO)

# ============================================================================
# Example 1: Rectangle and Month from the OPeNDAP Server
# ============================================================================

print("="*70)
print("Example 1: Rectangle and Month from the OPeNDAP Server")
print("="*70)

area = eobs.BoundingBox(lon_range=(4.0, 6.0), lat_range=(51.0, 53.0))
df = eobs.import_eobs("tg", "2010-01", area, grid="0.25reg")

print(f"\nRows: {len(df)}")
print(df.head())

# ============================================================================
# Example 2: Polygon Area
# ============================================================================

print("\n" + "="*70)
print("Example 2: Polygon Area")
print("="*70)

# Points outside the polygon are dropped after reading its bounding box
polygon = gpd.GeoDataFrame(geometry=[box(4.5, 51.5, 5.5, 52.5)], crs="EPSG:4326")
df = eobs.import_eobs("rr", "2012-06-01/2012-06-30", polygon, grid="0.50reg")

print(f"\nGrid points inside: {df[['longitude', 'latitude']].drop_duplicates().shape[0]}")

# ============================================================================
# Example 3: Local File
# ============================================================================

print("\n" + "="*70)
print("Example 3: Local File")
print("="*70)

filename = "tg_0.25deg_reg_v15.0.nc"

info = eobs.get_coordinate_info(filename)
print(f"\nGrid: {info['longitude']['size']} x {info['latitude']['size']}")
print(f"Dates: {info['time']['first_date']} to {info['time']['last_date']}")

# First 31 days, keeping rows with missing values
df = eobs.import_eobs_local("tg", filename, period=(0, 30), area=area, na_rm=False)
print(df.describe())

# Index ranges without reading any values
print(eobs.convert_area_to_indices(filename, area))
print(eobs.convert_period_to_indices(filename, "2010::2011"))
