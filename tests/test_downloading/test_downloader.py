import pytest
from urllib3 import Retry, Timeout
from urllib3.exceptions import HTTPError
from covidregion import DataDownloader, SourceTables, Term, DownloadError, UnExpectedTypeError, UnExpectedValueRangeError

TIME_SERIES_CSV = """Province/State,Country/Region,Lat,Long,1/22/20,1/23/20,1/24/20
,India,20.59,78.96,0,1,3
,Pakistan,30.38,69.35,0,0,2
Ontario,Canada,51.25,-85.32,1,1,2
"""
LOOKUP_CSV = """UID,iso2,iso3,code3,FIPS,Admin2,Province_State,Country_Region,Lat,Long_,Combined_Key,Population
356,IN,IND,356,,,,India,20.59,78.96,India,1380004385
586,PK,PAK,586,,,,Pakistan,30.38,69.35,Pakistan,220892331
12435,CA,CAN,124,,,Ontario,Canada,51.25,-85.32,"Ontario, Canada",14826276
124,CA,CAN,124,,,,Canada,60.00,-95.00,Canada,37855702
10,AQ,ATA,10,,,,Antarctica,-75.25,-0.07,Antarctica,
"""


class _Response(object):
    def __init__(self, status, data):
        self.status = status
        self.data = data


@pytest.fixture(scope="function")
def pool_manager(monkeypatch):
    """Replace urllib3.PoolManager with a stub server, whose responses are registered with {URL: (status, content)},
    recording the requested URLs and keyword arguments of the requests.
    """
    responses = {}
    requested = []
    options = []

    class _PoolManager(object):
        def __init__(self, **kwargs):
            pass

        def __enter__(self):
            return self

        def __exit__(self, *exc_info):
            return False

        def request(self, method, url, **kwargs):
            requested.append(url)
            options.append(kwargs)
            if url not in responses:
                raise HTTPError(f"Connection to {url} failed")
            status, content = responses[url]
            return _Response(status=status, data=content.encode("utf-8"))

    monkeypatch.setattr("covidregion.downloading._provider.PoolManager", _PoolManager)
    return responses, requested, options


@pytest.fixture(scope="function")
def local_files(tmp_path):
    confirmed = tmp_path.joinpath("confirmed.csv")
    confirmed.write_text(TIME_SERIES_CSV, encoding="utf-8")
    fatal = tmp_path.joinpath("fatal.csv")
    fatal.write_text(TIME_SERIES_CSV.replace(",1,3\n", ",0,1\n"), encoding="utf-8")
    lookup = tmp_path.joinpath("lookup.csv")
    lookup.write_text(LOOKUP_CSV, encoding="utf-8")
    return confirmed, fatal, lookup


class TestDataDownloader(object):
    def test_local(self, local_files):
        confirmed, fatal, lookup = local_files
        tables = DataDownloader(confirmed=confirmed, fatal=fatal, lookup=lookup).download()
        assert isinstance(tables, SourceTables)
        assert tables.confirmed.columns.tolist() == [*Term.WIDE_COLUMNS, "1/22/20", "1/23/20", "1/24/20"]
        assert tables.confirmed[Term.PROVINCE].tolist() == ["", "", "Ontario"]
        assert tables.fatal.loc[0, "1/24/20"] == 1
        assert tables.lookup.columns.tolist() == [Term.ADMIN2, Term.PROVINCE, Term.COUNTRY, Term.N]
        assert tables.lookup[Term.N].dtype == "Int64"
        assert tables.lookup[Term.N].isna().sum() == 1
        assert tables.lookup[Term.ADMIN2].eq("").all()

    def test_remote(self, pool_manager):
        responses, requested, _ = pool_manager
        responses.update({
            "https://example.com/confirmed.csv": (200, TIME_SERIES_CSV),
            "https://example.com/fatal.csv": (200, TIME_SERIES_CSV),
            "https://example.com/lookup.csv": (200, LOOKUP_CSV),
        })
        downloader = DataDownloader(
            confirmed="https://example.com/confirmed.csv", fatal="https://example.com/fatal.csv",
            lookup="https://example.com/lookup.csv", timeout=5, retries=0)
        confirmed_df, fatal_df, lookup_df = downloader.download()
        assert requested == ["https://example.com/confirmed.csv", "https://example.com/fatal.csv", "https://example.com/lookup.csv"]
        assert len(confirmed_df) == len(fatal_df) == 3
        assert lookup_df.loc[lookup_df[Term.COUNTRY] == "India", Term.N].tolist() == [1380004385]
        assert downloader.citations()[0].startswith("Dong, E.")

    def test_default_urls(self, pool_manager):
        _, requested, _ = pool_manager
        with pytest.raises(DownloadError):
            DataDownloader().download()
        assert requested[0].startswith("https://raw.githubusercontent.com/CSSEGISandData/COVID-19/")
        assert requested[0].endswith("time_series_covid19_confirmed_global.csv")

    def test_timeout_retries(self, pool_manager):
        responses, _, options = pool_manager
        for name in ("confirmed", "fatal", "lookup"):
            responses[f"https://example.com/{name}.csv"] = (200, LOOKUP_CSV if name == "lookup" else TIME_SERIES_CSV)
        DataDownloader(
            confirmed="https://example.com/confirmed.csv", fatal="https://example.com/fatal.csv",
            lookup="https://example.com/lookup.csv", timeout=5, retries=2, backoff_factor=0.5).download()
        assert len(options) == 3
        for kwargs in options:
            assert isinstance(kwargs["timeout"], Timeout)
            assert kwargs["timeout"].connect_timeout == 5
            assert kwargs["timeout"].read_timeout == 5
            assert isinstance(kwargs["retries"], Retry)
            assert kwargs["retries"].total == 2
            assert kwargs["retries"].backoff_factor == 0.5
            assert set(kwargs["retries"].status_forcelist) == {429, 500, 502, 503, 504}

    def test_default_timeout_retries(self, pool_manager):
        _, _, options = pool_manager
        with pytest.raises(DownloadError):
            DataDownloader().download()
        assert options[0]["timeout"].connect_timeout == 30
        assert options[0]["retries"].total == 3
        assert options[0]["retries"].backoff_factor == 1.0

    def test_error(self, pool_manager):
        responses, _, _ = pool_manager
        responses["https://example.com/confirmed.csv"] = (500, "Internal Server Error")
        responses["https://example.com/fatal.csv"] = (404, "Not Found")
        with pytest.raises(DownloadError, match="500"):
            DataDownloader(confirmed="https://example.com/confirmed.csv").download()
        with pytest.raises(DownloadError, match="404"):
            DataDownloader(confirmed="https://example.com/fatal.csv").download()
        with pytest.raises(DownloadError):
            DataDownloader(confirmed="https://example.com/unknown.csv").download()

    def test_arguments(self):
        with pytest.raises(UnExpectedValueRangeError):
            DataDownloader(timeout=-1)
        with pytest.raises(UnExpectedTypeError):
            DataDownloader(retries=1.5)
