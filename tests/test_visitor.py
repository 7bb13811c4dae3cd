from designpatterns.visitor import (
    AnalysisVisitor,
    CustomerCol,
    EnterpriseCustomer,
    IndividualCustomer,
    ServiceRequestVisitor,
)


def test_request_visitor(capsys):
    c = CustomerCol()
    c.add(EnterpriseCustomer("A company"))
    c.add(EnterpriseCustomer("B company"))
    c.add(IndividualCustomer("bob"))
    c.accept(ServiceRequestVisitor())
    assert capsys.readouterr().out == (
        "serving enterprise customer A company\n"
        "serving enterprise customer B company\n"
        "serving individual customer bob\n"
    )


def test_analysis(capsys):
    c = CustomerCol()
    c.add(EnterpriseCustomer("A company"))
    c.add(IndividualCustomer("bob"))
    c.add(EnterpriseCustomer("B company"))
    c.accept(AnalysisVisitor())
    assert capsys.readouterr().out == (
        "analysis enterprise customer A company\n"
        "analysis enterprise customer B company\n"
    )


def test_single_customer_accept(capsys):
    IndividualCustomer("ann").accept(ServiceRequestVisitor())
    assert capsys.readouterr().out == "serving individual customer ann\n"


def test_empty_collection(capsys):
    CustomerCol().accept(ServiceRequestVisitor())
    assert capsys.readouterr().out == ""