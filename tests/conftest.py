from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]


def repo_path(*parts: str) -> Path:
    return REPO_ROOT.joinpath(*parts)


SRC = repo_path("src")
sys.path.insert(0, str(SRC))


KEN_ALL_LINES = [
    '01101,"060  ","0600000","ﾎｯｶｲﾄﾞｳ","ｻｯﾎﾟﾛｼﾁｭｳｵｳｸ","ｲｶﾆｹｲｻｲｶﾞﾅｲﾊﾞｱｲ","北海道","札幌市中央区","以下に掲載がない場合",0,0,0,0,0,0',
    '01101,"064  ","0640941","ﾎｯｶｲﾄﾞｳ","ｻｯﾎﾟﾛｼﾁｭｳｵｳｸ","ｱｻﾋｶﾞｵｶ","北海道","札幌市中央区","旭ケ丘",0,0,1,0,0,0',
    '26102,"602  ","6028119","ｷｮｳﾄﾌ","ｷｮｳﾄｼｶﾐｷﾞｮｳｸ","ｲｽﾞﾐﾁｮｳ","京都府","京都市上京区","出水町（烏丸通下長者町下る、烏丸通出水上る、",0,0,0,0,0,0',
    '26102,"602  ","6028119","ｷｮｳﾄﾌ","ｷｮｳﾄｼｶﾐｷﾞｮｳｸ","ｲｽﾞﾐﾁｮｳ","京都府","京都市上京区","下長者町通烏丸西入、出水通烏丸西入）",0,0,0,0,0,0',
    '01224,"066  ","0660000","ﾎｯｶｲﾄﾞｳ","ﾁﾄｾｼ","ｲｶﾆｹｲｻｲｶﾞﾅｲﾊﾞｱｲ","北海道","千歳市","以下に掲載がない場合",0,0,0,1,0,0',
    '01224,"066  ","0660000","ﾎｯｶｲﾄﾞｳ","ﾁﾄｾｼ","ﾁﾄｾｲﾁｴﾝ","北海道","千歳市","千歳一円",0,0,0,1,0,0',
]

JIGYOSYO_LINES = [
    '01101,"(ｶﾌﾞ) ｻﾂﾎﾟﾛｼﾁﾕｳｵｳｸﾔｸｼﾖ","札幌市中央区役所","北海道","札幌市中央区","南三条西","１１丁目","0608612","060  ","札幌",0,0,0',
    '13101,"ﾆﾂﾎﾟﾝﾕｳﾋﾞﾝ ｶﾌﾞｼｷｶﾞｲｼﾔ","日本郵便　株式会社","東京都","千代田区","大手町","２丁目３－１","1008798","100  ","銀座",0,0,0',
]


def encode_csv(lines: list[str], encoding: str = "cp932") -> bytes:
    return ("\r\n".join(lines) + "\r\n").encode(encoding)


def write_csv_bytes(path: Path, lines: list[str]) -> Path:
    path.write_bytes(encode_csv(lines))
    return path


def identity(value: str | None) -> str:
    return value or ""
