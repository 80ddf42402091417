import pytest

PREFIXES = """\
@prefix sh: <http://www.w3.org/ns/shacl#> .
@prefix ex: <http://example.org/> .
@prefix code: <https://code.described.at/> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .
"""

# Things need exactly one string ex:name
NAME_SHAPE = """\
ex:ThingShape a sh:NodeShape ;
    sh:targetClass ex:Thing ;
    sh:property [
        sh:path ex:name ;
        sh:datatype xsd:string ;
        sh:minCount 1 ;
        sh:maxCount 1 ;
    ] .
"""

# Things should have a label; only a warning
LABEL_WARNING_SHAPE = """\
ex:LabelShape a sh:NodeShape ;
    sh:targetClass ex:Thing ;
    sh:property [
        sh:path ex:label ;
        sh:minCount 1 ;
        sh:severity sh:Warning ;
    ] .
"""

NAMED_THING = 'ex:t1 a ex:Thing ; ex:name "First" ; ex:label "one" .\n'
UNNAMED_THING = 'ex:t1 a ex:Thing ; ex:label "one" .\n'


def write_ttl(directory, name: str, body: str):
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(PREFIXES + body, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path):
    """A project root with a 'demo' profile whose shapes are split over two files."""
    write_ttl(tmp_path, "validation/demo-base.ttl", NAME_SHAPE)
    write_ttl(
        tmp_path, "validation/demo.ttl",
        '<> code:imports <./demo-base> ; code:extension "ignored" .\n'
        + LABEL_WARNING_SHAPE,
    )
    write_ttl(tmp_path, "test/demo/valid-named.ttl", NAMED_THING)
    write_ttl(tmp_path, "test/demo/invalid-unnamed.ttl", UNNAMED_THING)
    write_ttl(tmp_path, "test/demo/warning-unlabelled.ttl", 'ex:t1 a ex:Thing ; ex:name "First" .\n')
    write_ttl(tmp_path, "test/demo/valid-with-warning.ttl", 'ex:t1 a ex:Thing ; ex:name "First" .\n')
    return tmp_path
