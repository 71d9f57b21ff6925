"""Manifest route: GET /manifest.xml

Generates the Outlook mail add-in manifest with every URL pointing at
``PUBLIC_BASE_URL`` when configured, else at the requesting host.
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from flask import Blueprint, Response, current_app, request

manifest_bp = Blueprint("manifest", __name__)


def _base_url() -> str:
    configured = current_app.config.get("PUBLIC_BASE_URL")
    if configured:
        return configured.rstrip("/")
    return f"{request.scheme}://{request.host}"


@manifest_bp.get("/manifest.xml")
def manifest() -> Response:
    return Response(generate_manifest_xml(_base_url()), mimetype="application/xml")


def generate_manifest_xml(base_url: str) -> str:
    b = escape(base_url, {'"': "&quot;"})
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<OfficeApp xmlns="http://schemas.microsoft.com/office/appforoffice/1.1"
           xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
           xmlns:bt="http://schemas.microsoft.com/office/officeappbasictypes/1.0"
           xmlns:ov="http://schemas.microsoft.com/office/taskpaneappversionoverrides"
           xsi:type="MailApp">
  <Id>b2a8e5f8-5c74-4b9a-9b1f-1dbe9f07d111</Id>
  <Version>1.0.0.0</Version>
  <ProviderName>Pragmateches</ProviderName>
  <DefaultLocale>ja-JP</DefaultLocale>
  <DisplayName DefaultValue="ビジネス文面リライト" />
  <Description DefaultValue="下書きをビジネス向けにリライトします" />
  <IconUrl DefaultValue="{b}/web/assets/icon-32.png" />
  <HighResolutionIconUrl DefaultValue="{b}/web/assets/icon-80.png" />
  <SupportUrl DefaultValue="{b}" />
  <AppDomains>
    <AppDomain>{b}</AppDomain>
  </AppDomains>
  <Hosts>
    <Host Name="Mailbox" />
  </Hosts>
  <Requirements>
    <Sets DefaultMinVersion="1.1">
      <Set Name="Mailbox" />
    </Sets>
  </Requirements>
  <FormSettings>
    <Form xsi:type="ItemEdit">
      <DesktopSettings>
        <SourceLocation DefaultValue="{b}/web/function-file.html" />
      </DesktopSettings>
    </Form>
  </FormSettings>
  <Permissions>ReadWriteItem</Permissions>

  <Rule xsi:type="RuleCollection" Mode="And">
    <Rule xsi:type="ItemIs" ItemType="Message" FormType="Edit" />
  </Rule>

  <VersionOverrides xmlns="http://schemas.microsoft.com/office/taskpaneappversionoverrides" Version="1.0">
    <Hosts>
      <Host xsi:type="MailHost">
        <Runtimes>
          <Runtime resid="functionfile" lifetime="long" />
        </Runtimes>
        <ExtensionPoint xsi:type="MessageComposeCommandSurface">
          <OfficeTab id="TabDefault">
            <Group id="grpCompose" label="リライト">
              <Control xsi:type="Button" id="btnRewrite">
                <Label resid="btnRewriteLabel" />
                <Supertip>
                  <Title resid="btnRewriteLabel" />
                  <Description resid="btnRewriteDesc" />
                </Supertip>
                <Icon>
                  <bt:Image size="16" resid="icon16" />
                  <bt:Image size="32" resid="icon32" />
                  <bt:Image size="80" resid="icon80" />
                </Icon>
                <Action xsi:type="ExecuteFunction">
                  <FunctionName>rewriteToBusiness</FunctionName>
                </Action>
              </Control>
            </Group>
          </OfficeTab>
        </ExtensionPoint>
      </Host>
    </Hosts>
    <Resources>
      <bt:Images>
        <bt:Image id="icon16" DefaultValue="{b}/web/assets/icon-16.png" />
        <bt:Image id="icon32" DefaultValue="{b}/web/assets/icon-32.png" />
        <bt:Image id="icon80" DefaultValue="{b}/web/assets/icon-80.png" />
      </bt:Images>
      <bt:Urls>
        <bt:Url id="functionfile" DefaultValue="{b}/web/function-file.html" />
      </bt:Urls>
      <bt:ShortStrings>
        <bt:String id="btnRewriteLabel" DefaultValue="ビジネスに整える" />
      </bt:ShortStrings>
      <bt:LongStrings>
        <bt:String id="btnRewriteDesc" DefaultValue="下書きを丁寧で読みやすいビジネス文にリライトします" />
      </bt:LongStrings>
    </Resources>
  </VersionOverrides>
</OfficeApp>"""
