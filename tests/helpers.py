HEADER = "Region\tRegionMM\tCode\tTownship\tPattern\tTownshipMM"


def make_line(region, township, township_local, region_local="ရှမ်း", code="13", pattern="TaKaNa"):
    return "\t".join([region, region_local, code, township, pattern, township_local])
