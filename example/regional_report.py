#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pathlib import Path
import covidregion as cr


def main():
    print(cr.get_version())
    # Create output directory in example directory
    code_path = Path(__file__)
    output_dir = code_path.with_name("output").joinpath(code_path.stem)
    # Download the time series and population values, and select the records
    engineer = cr.DataEngineer(countries=cr.TARGET_COUNTRIES)
    engineer.download(timeout=60, retries=5, backoff_factor=2.0)
    df = engineer.reshape().merge().filter().all()
    print(df.head())
    # Figures and regression analysis
    report = cr.RegionalReport(df, selected=cr.SELECTED_COUNTRIES)
    filer = cr.Filer(directory=output_dir, numbering="01")
    results = report.run(filer=filer)
    for result in results.values():
        print(result.summary())
        print()
    print("\n".join(engineer.citations()))


if __name__ == "__main__":
    main()
